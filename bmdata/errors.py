class BookmarkError(Exception):
    message = "Failed to decode bookmark"

    def __init__(self, reason=None):
        self.reason = reason
        if reason:
            super().__init__("{}: {}".format(self.message, reason))
        else:
            super().__init__(self.message)


class BadHeader(BookmarkError):
    message = "Incorrect bookmark header"


class BadBookmarkData(BookmarkError):
    message = "Failed to parse bookmark data"
