"""ObjectScale management API clients.

This package provides the generic remote-call dispatcher, the session
authenticators and one client per management resource family.
"""

from .alert_policies import AlertPoliciesClient
from .auth import (
    Authenticator,
    ServiceAuthenticator,
    Session,
    TokenAuthenticator,
    UserAuthenticator,
    default_expiry_predicate,
    expiry_on,
)
from .base_client import ManagementAPIClient, RemoteCaller
from .buckets import BucketsClient
from .client_set import ClientSet
from .crr import CRRClient
from .exceptions import (
    APIClientError,
    APIError,
    AuthenticationError,
    CodecError,
    DecodeError,
    DNSResolutionError,
    EncodeError,
    InvalidRequestError,
    NetworkConnectionError,
    NetworkTimeoutError,
    SSLCertificateError,
    TransportError,
)
from .federated_object_stores import FederatedObjectStoresClient
from .object_users import ObjectUsersClient
from .objmt import ObjmtClient
from .request import ContentType, HTTPMethod, Request
from .status import StatusClient
from .tenants import TenantsClient

__all__ = [
    # Dispatcher
    "ManagementAPIClient",
    "RemoteCaller",
    "Request",
    "ContentType",
    "HTTPMethod",
    # Authentication
    "Authenticator",
    "TokenAuthenticator",
    "UserAuthenticator",
    "ServiceAuthenticator",
    "Session",
    "default_expiry_predicate",
    "expiry_on",
    # Resource clients
    "ClientSet",
    "AlertPoliciesClient",
    "BucketsClient",
    "CRRClient",
    "FederatedObjectStoresClient",
    "ObjectUsersClient",
    "ObjmtClient",
    "StatusClient",
    "TenantsClient",
    # Exceptions
    "APIClientError",
    "APIError",
    "AuthenticationError",
    "CodecError",
    "DecodeError",
    "EncodeError",
    "InvalidRequestError",
    "TransportError",
    "NetworkConnectionError",
    "NetworkTimeoutError",
    "DNSResolutionError",
    "SSLCertificateError",
]
