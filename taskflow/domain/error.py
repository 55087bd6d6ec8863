"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class MissingFieldsError(DomainError):
    """Raised when required input fields are absent or blank."""

    def __init__(self, message: str, fields: list[str] | None = None):
        self.fields = fields or []
        super().__init__(message)


class DuplicateAccountError(DomainError):
    """Raised when registering an email that already has an account."""

    def __init__(self):
        super().__init__("User already exists")


class InvalidCredentialsError(DomainError):
    """Raised when a local login cannot be completed.

    Unknown email and wrong password share the same message so the
    response does not reveal whether an account exists.
    """

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class ExternalLoginRequiredError(InvalidCredentialsError):
    """Raised on password login for an account that has no password."""

    def __init__(self):
        super().__init__("Please login with Google")


class ProviderAssertionInvalidError(DomainError):
    """Raised when a provider assertion lacks the id or email."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Provider assertion missing: {', '.join(missing)}")


class AccountResolutionError(DomainError):
    """Raised when account resolution keeps colliding with concurrent writers."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateKeyError(DomainError):
    """Raised by repositories when a write violates a uniqueness constraint."""

    def __init__(self, resource: str, field: str):
        self.resource = resource
        self.field = field
        super().__init__(f"{resource} with this {field} already exists")


class UpstreamUnavailableError(DomainError):
    """Raised when the backing store cannot be reached."""

    pass


class ProviderNotConfiguredError(DomainError):
    """Raised when a login provider has no configured client."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"{provider} OAuth is not configured")
