# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Client Error Code Enumeration.

Defines the error codes attached to every ClientError raised by the
consul_kv package. Codes classify the failure so callers can branch on
them without matching exception messages.
"""

from enum import Enum


class EnumClientErrorCode(str, Enum):
    """Error codes for consul_kv client errors.

    Attributes:
        OPERATION_FAILED: Generic failure (default for the base error)
        INVALID_REQUEST: Request builder was missing a field or misconfigured
        CONNECTION_ERROR: Transport could not reach the Consul agent
        TIMEOUT: Transport timed out waiting for the Consul agent
        API_ERROR: Consul answered with a non-success HTTP status
        AUTHENTICATION_FAILED: Consul rejected the ACL token (401/403)
        RESPONSE_DECODE_ERROR: Response body did not match the expected envelope
        EMPTY_RESPONSE: A typed read found no value to decode
        JSON_DESERIALIZE_ERROR: Stored payload is not valid JSON for the target type
        JSON_SERIALIZE_ERROR: Caller value could not be encoded as JSON
    """

    OPERATION_FAILED = "operation_failed"
    INVALID_REQUEST = "invalid_request"
    CONNECTION_ERROR = "connection_error"
    TIMEOUT = "timeout"
    API_ERROR = "api_error"
    AUTHENTICATION_FAILED = "authentication_failed"
    RESPONSE_DECODE_ERROR = "response_decode_error"
    EMPTY_RESPONSE = "empty_response"
    JSON_DESERIALIZE_ERROR = "json_deserialize_error"
    JSON_SERIALIZE_ERROR = "json_serialize_error"


__all__ = ["EnumClientErrorCode"]
