# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for the consul_kv package."""

from consul_kv.enums.enum_acl_policy import EnumAclPolicy
from consul_kv.enums.enum_client_error_code import EnumClientErrorCode
from consul_kv.enums.enum_consistency_mode import EnumConsistencyMode
from consul_kv.enums.enum_query_backend import EnumQueryBackend

__all__: list[str] = [
    "EnumAclPolicy",
    "EnumClientErrorCode",
    "EnumConsistencyMode",
    "EnumQueryBackend",
]
