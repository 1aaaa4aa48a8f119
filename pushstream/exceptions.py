__all__ = (
    "PushStreamError",
    "StreamContractError",
)


class PushStreamError(Exception): ...


class StreamContractError(TypeError, PushStreamError): ...
