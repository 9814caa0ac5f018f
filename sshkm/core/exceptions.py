class KeyManagerError(Exception):
    """Base exception for all sshkm errors."""

    exit_code = 1


class EnvironmentResolutionError(KeyManagerError):
    """Home directory or SSH directory could not be determined."""

    exit_code = 3


class KeyFileError(KeyManagerError):
    """Reading, writing or removing a key or config file failed."""

    exit_code = 4


class KeyGenerationError(KeyManagerError):
    """The external key generator failed or could not be run."""

    exit_code = 5


class UserInputError(KeyManagerError):
    """The request cannot be carried out as given."""

    exit_code = 2


class AlreadyMappedError(UserInputError):
    """Host already has a key mapped."""

    exit_code = 0

    def __init__(self, host: str) -> None:
        super().__init__(
            f"The host {host} already has a key mapped. "
            "Please unmap the current key before mapping a new one."
        )
        self.host = host
