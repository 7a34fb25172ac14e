"""Infrastructure AWS clients public API.

This package provides DI-friendly AWS clients. The facade, AWSClients, builds
the IAM client from settings:

    from infrastructure.clients.aws import AWSClients
    from infrastructure.configuration import settings

    aws = AWSClients(settings.aws)
    result = aws.iam.get_group("developers")
    if result.is_success:
        users = result.data["users"]
"""

from infrastructure.clients.aws.facade import AWSClients
from infrastructure.clients.aws.iam import IamClient
from infrastructure.clients.aws.session_provider import SessionProvider

__all__ = [
    "AWSClients",
    "IamClient",
    "SessionProvider",
]
