from errors import (
    APIStatusError,
    ChatError,
    ConfigurationError,
    ErrorType,
    ResponseFormatError,
    TransportError,
)


def test_error_type_values():
    assert ErrorType.CONFIGURATION.value == "configuration"
    assert ErrorType.TRANSPORT.value == "transport"


def test_error_classes():
    err = ChatError("oops")
    assert err.message == "oops"
    assert err.error_type == ErrorType.TRANSPORT

    config = ConfigurationError("missing")
    assert config.error_type == ErrorType.CONFIGURATION

    status = APIStatusError("bad", status_code=529, error_kind="overloaded_error")
    assert isinstance(status, TransportError)
    assert status.status_code == 529
    assert status.error_kind == "overloaded_error"

    fmt = ResponseFormatError("shape")
    assert isinstance(fmt, TransportError)
    assert fmt.error_type == ErrorType.TRANSPORT
