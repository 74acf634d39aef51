class SheetpeekError(Exception):
    pass


class InputError(SheetpeekError):
    pass


class UnsupportedFileTypeError(InputError):
    pass


class MissingFileError(InputError):
    pass


class SpreadsheetDecodeError(SheetpeekError):
    pass


class EncryptedWorkbookError(SpreadsheetDecodeError):
    pass


class ExportError(SheetpeekError):
    pass
