"""Infrastructure modules for the IAM group membership resource.

- clients: AWS clients (IamClient, AWSClients facade)
- configuration: Settings management (settings)
- logging: structlog setup and context binding
- operations: Operation results and error classification
"""
