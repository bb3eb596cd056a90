class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(CustomBaseError):
    pass


class ServiceNotFoundError(NotFoundError):
    def __init__(self, service_id: str) -> None:
        self.service_id = service_id
        super().__init__(f'You have requested a non-existent service "{service_id}".')


class BundleNotFoundError(NotFoundError):
    def __init__(self, bundle_name: str) -> None:
        self.bundle_name = bundle_name
        super().__init__(
            f'Bundle "{bundle_name}" does not exist or it is not registered in the kernel.'
        )


class FixtureFileNotFoundError(NotFoundError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f'The fixtures file "{path}" does not exist.')


class FixtureFileError(CustomBaseError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f'Invalid fixtures file "{path}": {reason}')


class InvalidPersisterError(CustomBaseError, ValueError):
    pass


class ContextNotInitializedError(CustomBaseError, RuntimeError):
    def __init__(self, context_name: str) -> None:
        super().__init__(
            f'{context_name} is not initialized, '
            'call init() or set_kernel() before loading fixtures.'
        )
