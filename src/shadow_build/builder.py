"""Build orchestration: collect facts and write the generated constants file."""

import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Mapping, Optional

from .ci import CIPlatform, detect
from .collectors import Toolchain, project_facts, system_facts
from .config import SHADOW_RS, ShadowConfig
from .env import EnvironmentSnapshot
from .errors import ShadowError
from .generator import generate
from .store import FactStore, merge
from .vcs import extract


def output_path(out_path: str, filename: str = SHADOW_RS) -> str:
    """Join the generated file name onto the output directory.

    ``"./out"`` and ``"./out/"`` both resolve to ``"./out/shadow.rs"``.
    """
    return os.path.join(out_path, filename)


@dataclass
class BuildResult:
    """Result of one generation run."""
    success: bool
    output_path: str
    ci: CIPlatform
    store: FactStore
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


class ShadowBuilder:
    """Collects build provenance for a source tree and writes it out."""

    def __init__(
        self,
        src_path: str = ".",
        env: Optional[Mapping[str, str]] = None,
        config: Optional[ShadowConfig] = None,
        toolchain: Optional[Toolchain] = None,
    ):
        """Initialize the builder.

        Args:
            src_path: Source directory of the project being built.
            env: Environment snapshot; captured from the process when omitted.
            config: Generation settings; read from ``shadow.yml`` when omitted.
            toolchain: Probe for toolchain versions.
        """
        self.src_path = src_path
        self.env = EnvironmentSnapshot.capture(env)
        self.config = config if config is not None else ShadowConfig.from_shadow_yml(src_path)
        self.toolchain = toolchain if toolchain is not None else Toolchain(self.env)
        self.ci = detect(self.env)

    def collect(self, now: Optional[datetime] = None) -> FactStore:
        """Gather every fact and merge them into a store.

        Fragments are merged VCS first, then project, then system, and the
        configured exclusions are dropped afterwards.
        """
        store = merge([
            extract(self.src_path, self.ci, self.env, lock_file=self.config.lock_file, now=now),
            project_facts(self.env),
            system_facts(self.env, self.toolchain),
        ])
        if self.config.exclude:
            store = store.without(self.config.exclude)
        return store

    def build(self, out_path: str, now: Optional[datetime] = None) -> BuildResult:
        """Generate the constants file inside ``out_path``.

        Args:
            out_path: Output directory; the configured file name is joined onto it.
            now: Timestamp used for the build time and the file header.

        Returns:
            BuildResult: ``success`` is False only when the file could not be written.
        """
        now = now or datetime.now()
        store = self.collect(now)
        target = output_path(out_path, self.config.output_file)
        warnings = list(self.config.warnings)

        try:
            generate(
                store,
                target,
                now=now,
                generator_name=self.config.generator_name,
                author_url=self.config.author_url,
            )
        except ShadowError as e:
            return BuildResult(
                success=False,
                output_path=target,
                ci=self.ci,
                store=store,
                warnings=warnings,
                errors=[str(e)],
            )

        return BuildResult(success=True, output_path=target, ci=self.ci, store=store, warnings=warnings)


def build(
    src_path: str,
    out_path: str,
    env: Optional[Mapping[str, str]] = None,
    config: Optional[ShadowConfig] = None,
    toolchain: Optional[Toolchain] = None,
    now: Optional[datetime] = None,
) -> BuildResult:
    """Collect build provenance for ``src_path`` and write it into ``out_path``.

    Convenience wrapper around :class:`ShadowBuilder`.
    """
    builder = ShadowBuilder(src_path, env=env, config=config, toolchain=toolchain)
    return builder.build(out_path, now=now)


class Shadow:
    """Entry point for build scripts that prefer exceptions to result objects."""

    @classmethod
    def build(
        cls,
        src_path: str,
        out_path: str,
        env: Optional[Mapping[str, str]] = None,
        config: Optional[ShadowConfig] = None,
        toolchain: Optional[Toolchain] = None,
        now: Optional[datetime] = None,
    ) -> BuildResult:
        """Run :func:`build` and raise on failure.

        Raises:
            ShadowError: If the generated file could not be written.
        """
        result = build(src_path, out_path, env=env, config=config, toolchain=toolchain, now=now)
        if not result.success:
            raise ShadowError(result.errors[0])
        return result
