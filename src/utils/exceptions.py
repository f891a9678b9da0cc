"""
Custom exception classes
"""


class InfinityError(Exception):
    """Base exception class"""
    pass


class FeatureDisabledError(InfinityError):
    """Raised when the chat feature is turned off in configuration"""
    def __init__(self, feature: str = "chat"):
        self.feature = feature
        super().__init__(f"Feature disabled: {feature}")


class OfficeNotFoundError(InfinityError):
    """Raised when a requested office does not exist"""
    def __init__(self, office_id: str):
        self.office_id = office_id
        super().__init__(f"Unknown office: {office_id}")


class SessionNotFoundError(InfinityError):
    """Raised when a chat session cannot be found"""
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


class InvalidStatusTransitionError(InfinityError):
    """Raised when a session status change is not allowed"""
    def __init__(self, from_status: str, to_status: str):
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(f"Invalid status transition: {from_status} -> {to_status}")


class AdminModeDisabledError(InfinityError):
    """Raised when an admin endpoint is called with admin mode off"""
    def __init__(self):
        super().__init__("Admin mode is disabled")


class TemplateRenderError(InfinityError):
    """Raised when a page template cannot be loaded or rendered"""
    def __init__(self, template_name: str, message: str):
        self.template_name = template_name
        super().__init__(f"Template error in {template_name}: {message}")


class ValidationError(InfinityError):
    """Raised when data fails validation"""
    def __init__(self, message: str, field: str = None):
        self.field = field
        super().__init__(f"Validation failed: {message}")
