class SignalException(Exception):
    pass


class SignalAlreadySetError(SignalException):
    pass


class SignalAlreadyConsumedError(SignalException):
    pass
