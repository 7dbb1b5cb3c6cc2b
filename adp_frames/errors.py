class FrameLocateError(ValueError):
    """Base class for every terminal failure of a locate call."""


class UnsupportedAuxiliaryStream(FrameLocateError):
    def __init__(self, streams):
        self.streams = tuple(streams)
        super().__init__(
            "cannot read SonTek ADP files with " + ", ".join(s.replace("_", "-") for s in self.streams) + " data"
        )


class InsufficientData(FrameLocateError):
    pass


class GeometryNotFound(FrameLocateError):
    pass


class InvalidGeometry(FrameLocateError):
    pass
