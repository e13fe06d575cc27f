"""
Compiler Settings
Solidity compiler version and optimizer parameters used for every build
"""

import json
from dataclasses import dataclass
from typing import Dict

DEFAULT_CONFIG_PATH = "config/compiler_config.json"


@dataclass(frozen=True)
class CompilerSettings:
    """
    Build configuration shared by every compilation

    Values are passed through to solc untouched; an unsupported
    version or a bad runs value is reported by the compiler itself.
    """

    version: str
    optimizer_enabled: bool
    optimizer_runs: int
    sources_dir: str = "contracts"
    artifacts_dir: str = "artifacts"

    def to_solc_settings(self) -> Dict:
        """Render the `settings` block of a solc standard-JSON input"""
        return {
            'optimizer': {
                'enabled': self.optimizer_enabled,
                'runs': self.optimizer_runs
            },
            'outputSelection': {
                '*': {
                    '*': ['abi', 'evm.bytecode.object']
                }
            }
        }


def load_compiler_settings(config_path: str = DEFAULT_CONFIG_PATH) -> CompilerSettings:
    """
    Load compiler settings from JSON config

    Args:
        config_path: Path to compiler config file

    Returns:
        CompilerSettings instance
    """
    with open(config_path, 'r') as f:
        config = json.load(f)

    solidity = config['solidity']
    optimizer = solidity.get('settings', {}).get('optimizer', {})
    paths = config.get('paths', {})

    return CompilerSettings(
        version=solidity['version'],
        optimizer_enabled=optimizer.get('enabled', False),
        optimizer_runs=optimizer.get('runs', 200),
        sources_dir=paths.get('sources', 'contracts'),
        artifacts_dir=paths.get('artifacts', 'artifacts')
    )
