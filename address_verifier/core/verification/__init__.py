"""SmartyStreets address verification.

This package provides:
- Eligibility gating (lock state, cooldown, country blacklist)
- Domestic/international request construction
- Response interpretation against configurable precision policies
- The orchestrating verification service
"""

from address_verifier.core.verification.config import VerificationConfig
from address_verifier.core.verification.eligibility import (
    CountryResolver,
    EligibilityGate,
    MappingCountryResolver,
    PassthroughCountryResolver,
    RedisCountryResolver,
)
from address_verifier.core.verification.errors import (
    CountryNotFoundError,
    TransportError,
    VerificationError,
)
from address_verifier.core.verification.interpreter import (
    Interpretation,
    ResponseInterpreter,
)
from address_verifier.core.verification.policy import (
    PrecisionMatchMode,
    PrecisionPolicy,
)
from address_verifier.core.verification.request_builder import (
    ProviderRequest,
    RequestBuilder,
    RouteKind,
    choose_route,
)
from address_verifier.core.verification.service import (
    VerificationOrchestrator,
    VerificationOutcome,
    get_verification_service,
)
from address_verifier.core.verification.transport import (
    RequestsTransport,
    Transport,
    TransportResponse,
)

__all__ = [
    "CountryNotFoundError",
    "CountryResolver",
    "EligibilityGate",
    "Interpretation",
    "MappingCountryResolver",
    "PassthroughCountryResolver",
    "PrecisionMatchMode",
    "PrecisionPolicy",
    "ProviderRequest",
    "RedisCountryResolver",
    "RequestBuilder",
    "RequestsTransport",
    "ResponseInterpreter",
    "RouteKind",
    "Transport",
    "TransportError",
    "TransportResponse",
    "VerificationConfig",
    "VerificationError",
    "VerificationOrchestrator",
    "VerificationOutcome",
    "choose_route",
    "get_verification_service",
]
