"""
Solidity Compiler
Compiles contract sources with solc and stores deployable artifacts
"""

import glob
import hashlib
import json
import os
from typing import Dict, List

import solcx
from solcx.exceptions import SolcError
from loguru import logger

from .compiler_settings import CompilerSettings
from .errors import CompilationError


class SolidityCompiler:
    """
    Builds every source under the sources directory into
    artifacts/contracts/<File>.sol/<Contract>.json
    """

    def __init__(self, settings: CompilerSettings):
        """
        Initialize Solidity Compiler

        Args:
            settings: Compiler version and optimizer settings
        """
        self.settings = settings
        self.sources_dir = settings.sources_dir
        self.artifacts_dir = os.path.join(settings.artifacts_dir, 'contracts')

    def ensure_solc(self):
        """Install the configured solc version if it is not present"""
        installed = [str(v) for v in solcx.get_installed_solc_versions()]

        if self.settings.version not in installed:
            logger.debug(f"Installing solc {self.settings.version}...")
            solcx.install_solc(self.settings.version)

    def _collect_sources(self) -> Dict[str, Dict]:
        """Read all .sol files, keyed by project-relative source name"""
        pattern = os.path.join(self.sources_dir, '**', '*.sol')
        prefix = os.path.basename(os.path.normpath(self.sources_dir))
        sources = {}

        for path in sorted(glob.glob(pattern, recursive=True)):
            relative = os.path.relpath(path, self.sources_dir).replace(os.sep, '/')
            with open(path, 'r') as f:
                sources[f"{prefix}/{relative}"] = {'content': f.read()}

        return sources

    def build_fingerprint(self, sources: Dict[str, Dict]) -> str:
        """Hash of solc version, settings and source contents"""
        build_input = {
            'version': self.settings.version,
            'settings': self.settings.to_solc_settings(),
            'sources': sources
        }
        encoded = json.dumps(build_input, sort_keys=True).encode('utf-8')
        return hashlib.sha256(encoded).hexdigest()

    def compile(self) -> List[str]:
        """
        Compile all sources and write their artifacts

        Returns:
            Names of the contracts that were written
        """
        sources = self._collect_sources()

        if not sources:
            raise CompilationError(f"No Solidity sources found in {self.sources_dir}")

        self.ensure_solc()

        logger.debug(
            f"Compiling {len(sources)} source file(s) with solc {self.settings.version} "
            f"(optimizer: {self.settings.optimizer_enabled}, runs: {self.settings.optimizer_runs})"
        )

        try:
            output = solcx.compile_standard(
                {
                    'language': 'Solidity',
                    'sources': sources,
                    'settings': self.settings.to_solc_settings()
                },
                solc_version=self.settings.version
            )
        except SolcError as e:
            raise CompilationError(f"Compilation failed: {e}") from e

        fingerprint = self.build_fingerprint(sources)
        written = []
        for source_name, contracts in output.get('contracts', {}).items():
            for contract_name, data in contracts.items():
                self._write_artifact(source_name, contract_name, data, fingerprint)
                written.append(contract_name)

        logger.debug(f"Wrote artifacts: {', '.join(written)}")
        return written

    def _write_artifact(self, source_name: str, contract_name: str, data: Dict, fingerprint: str):
        """Store one compiled contract"""
        bytecode = data['evm']['bytecode']['object']
        artifact = {
            'contractName': contract_name,
            'sourceName': source_name,
            'abi': data['abi'],
            'bytecode': bytecode if bytecode.startswith('0x') else f"0x{bytecode}",
            'buildFingerprint': fingerprint
        }

        directory = os.path.join(self.artifacts_dir, os.path.basename(source_name))
        os.makedirs(directory, exist_ok=True)

        with open(os.path.join(directory, f"{contract_name}.json"), 'w') as f:
            json.dump(artifact, f, indent=2)

    def find_artifact(self, contract_name: str):
        """Path of a stored artifact, or None"""
        pattern = os.path.join(self.artifacts_dir, '**', f"{contract_name}.json")
        matches = sorted(glob.glob(pattern, recursive=True))
        return matches[0] if matches else None

    def _load_artifact(self, contract_name: str):
        """Stored artifact dict, or None"""
        path = self.find_artifact(contract_name)
        if path is None:
            return None

        with open(path, 'r') as f:
            return json.load(f)

    def get_artifact(self, contract_name: str) -> Dict:
        """
        Load a contract artifact, recompiling when it is missing or stale

        An artifact is stale when the sources, solc version or optimizer
        settings differ from the ones it was built with.

        Args:
            contract_name: Contract name, e.g. "TweetRegistry"

        Returns:
            Artifact dict with abi and bytecode
        """
        fingerprint = self.build_fingerprint(self._collect_sources())
        artifact = self._load_artifact(contract_name)

        if artifact is None or artifact.get('buildFingerprint') != fingerprint:
            logger.debug(f"Artifact for {contract_name} missing or out of date, compiling")
            self.compile()
            artifact = self._load_artifact(contract_name)

        if artifact is None:
            raise CompilationError(f"Contract {contract_name} not found in {self.sources_dir}")

        return artifact
