class LyricSyncError(Exception):
    pass


class SourceUnavailable(LyricSyncError):
    def __init__(self, location: str, reason: str):
        super().__init__(f"{location}: {reason}")
        self.location = location
        self.reason = reason
