"""
Custom exception hierarchy for didox-sdk.

All errors raised by the SDK are domain-specific and inherit from
a base DidoxError exception, so callers can catch everything the
SDK raises with a single except clause.
"""

from typing import Any, Dict, Optional


class DidoxError(Exception):
    """
    Base exception for all didox-sdk errors.

    All custom exceptions should inherit from this class to maintain
    a consistent error hierarchy.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """
        Initialize SDK error.

        Args:
            message: Human-readable error message
            context: Additional context about the error (dict)
            cause: Original exception that caused this error (if any)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        base_message = self.message

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_message = f"{base_message} ({context_str})"

        if self.cause:
            base_message = f"{base_message} [Caused by: {type(self.cause).__name__}: {str(self.cause)}]"

        return base_message


class ValidationError(DidoxError):
    """
    Raised when client-side input validation fails.

    Examples:
        - TIN is not 9 digits
        - Password shorter than 8 characters
        - Unsupported locale
        - Empty document type code
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        invalid_value: Optional[Any] = None,
        validation_rule: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        """
        Initialize validation error.

        Args:
            message: Error message
            field_name: Name of field that failed validation
            invalid_value: Invalid value provided
            validation_rule: Rule that was violated
            cause: Original exception
        """
        context = {}
        if field_name:
            context["field"] = field_name
        if invalid_value is not None:
            context["value"] = str(invalid_value)
        if validation_rule:
            context["rule"] = validation_rule

        super().__init__(message=message, context=context, cause=cause)
        self.field_name = field_name


class DocumentBuildError(ValidationError):
    """
    Base class for failures raised by a document builder's build().

    Build errors are local programmer errors: they are raised
    synchronously, are never retryable, and leave the builder
    untouched so the caller can fix the draft and build again.
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        document_type: Optional[str] = None,
        validation_rule: Optional[str] = None,
    ):
        """
        Initialize build error.

        Args:
            message: Error message
            field_name: Draft section or field path at fault
            document_type: Document type code of the builder (e.g. "002")
            validation_rule: Rule that was violated
        """
        super().__init__(
            message=message,
            field_name=field_name,
            validation_rule=validation_rule,
        )
        self.document_type = document_type
        if document_type:
            self.context["document_type"] = document_type


class MissingRequiredSectionError(DocumentBuildError):
    """
    Raised when a mandatory draft block was never set.

    Examples:
        - Invoice built without factura header
        - Waybill built without carrier
        - Empowerment built without agent
    """

    def __init__(self, message: str, section: str, document_type: Optional[str] = None):
        super().__init__(
            message=message,
            field_name=section,
            document_type=document_type,
            validation_rule="required",
        )
        self.section = section


class EmptyRequiredListError(DocumentBuildError):
    """
    Raised when a mandatory repeated collection has zero entries.

    Examples:
        - Act without products
        - Multi-party document without clients
        - Founders' protocol without agenda parts
    """

    def __init__(self, message: str, list_name: str, document_type: Optional[str] = None):
        super().__init__(
            message=message,
            field_name=list_name,
            document_type=document_type,
            validation_rule="non_empty",
        )
        self.list_name = list_name


class MissingRequiredListItemFieldError(DocumentBuildError):
    """
    Raised when an entry of a repeated collection lacks a mandatory field.

    Examples:
        - Multi-party client without TIN
        - Multi-party client without address
    """

    def __init__(
        self,
        message: str,
        list_name: str,
        index: int,
        item_field: str,
        document_type: Optional[str] = None,
    ):
        super().__init__(
            message=message,
            field_name=f"{list_name}[{index}].{item_field}",
            document_type=document_type,
            validation_rule="required",
        )
        self.list_name = list_name
        self.index = index
        self.item_field = item_field


class ConfigurationError(DidoxError):
    """
    Raised when SDK configuration is invalid.

    Examples:
        - Partner token missing
        - Unknown environment name
        - Non-positive timeout
        - Unknown builder name or document type code
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        expected_type: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        """
        Initialize configuration error.

        Args:
            message: Error message
            config_key: Configuration key that is invalid
            config_value: Invalid value provided
            expected_type: Expected type/format
            cause: Original exception
        """
        context = {}
        if config_key:
            context["config_key"] = config_key
        if config_value is not None:
            context["config_value"] = str(config_value)
        if expected_type:
            context["expected_type"] = expected_type

        super().__init__(message=message, context=context, cause=cause)


class DidoxApiError(DidoxError):
    """
    Raised when the Didox API answers with an error response.

    Examples:
        - HTTP 400 for a rejected draft payload
        - HTTP 404 for an unknown document id
        - Response body is not valid JSON
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response: Optional[Any] = None,
        cause: Optional[Exception] = None,
    ):
        """
        Initialize API error.

        Args:
            message: Error message
            status_code: HTTP status code
            response: Parsed response body (if any)
            cause: Original exception
        """
        super().__init__(message=message, context={"status_code": status_code}, cause=cause)
        self.status_code = status_code
        self.response = response


class DidoxAuthError(DidoxError):
    """
    Raised when a login call is refused.

    Examples:
        - Wrong password (HTTP 422)
        - Expired user token on company login
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ):
        context = {}
        if status_code:
            context["status_code"] = status_code

        super().__init__(message=message, context=context, cause=cause)
        self.status_code = status_code


class DidoxNetworkError(DidoxError):
    """
    Raised when the HTTP request itself fails.

    Examples:
        - Request timeout
        - DNS or connection failure
    """

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message=message, cause=cause)
