"""
TweetRegistry Deployment Script
Deploys TweetRegistry to the configured network and prints its address

Usage: python -m scripts.deploy  (network from DEPLOY_NETWORK)
"""

import os
import sys
from loguru import logger
from dotenv import load_dotenv

from blockchain.contract_deployer import ContractDeployer, DeploymentResult

load_dotenv()

CONTRACT_NAME = "TweetRegistry"


def configure_logging():
    """Progress lines to stdout, errors to stderr, optional debug file"""
    logger.remove()
    logger.add(
        sys.stdout,
        format="{message}",
        level="INFO",
        filter=lambda record: record["level"].no < 40,
        colorize=False
    )
    logger.add(
        sys.stderr,
        format="<red>{level}</red> | {message}",
        level="ERROR",
        colorize=False,
        backtrace=False,
        diagnose=False
    )

    log_file = os.getenv('DEPLOY_LOG_FILE')
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )


def deploy_contract(deployer, contract_name: str = CONTRACT_NAME) -> DeploymentResult:
    """
    Deploy one contract and wait for it to be mined

    Args:
        deployer: Deployment facility (deploy / wait_for_deployment / get_address)
        contract_name: Contract to deploy

    Returns:
        DeploymentResult with the confirmed address
    """
    pending = deployer.deploy(contract_name)
    logger.info(f"Deploying {contract_name}...")

    deployed = deployer.wait_for_deployment(pending)
    contract_address = deployer.get_address(deployed)

    logger.info(f"{contract_name} deployed at: {contract_address}")
    return DeploymentResult(contract_address, pending.tx_hash)


def main(deployer=None) -> int:
    """
    Run a single deployment attempt

    Returns:
        Process exit status (0 on success, 1 on any error)
    """
    configure_logging()

    try:
        if deployer is None:
            deployer = ContractDeployer.from_environment()

        deploy_contract(deployer)
    except Exception as e:
        logger.opt(exception=e).error(f"Deployment failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
