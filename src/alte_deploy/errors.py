class DeploymentFailure(Exception):
    """Raised when the deployment backend rejects or fails any step."""


class ContractFactoryNotFound(DeploymentFailure):
    """Raised when no compiled artifact exists for the requested contract."""


class InsufficientFunds(DeploymentFailure):
    """Raised when the deployer account cannot pay for the deployment."""
