# topmark:header:start
#
#   project      : FrontMeta
#   file         : config.py
#   file_relpath : src/frontmeta/sync/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sync-tool configuration model and loader.

The sync tool mirrors a remote knowledge base (``login/repo``) into the site's
content tree. Its settings come from the first readable file among
``config.json``, ``config.yaml``, ``config.yml`` and ``config.toml`` in the
working directory; keys missing from that file keep their defaults.

Typical use:
    ```python
    diagnostics = DiagnosticLog()
    cfg = load_sync_config(Path("."), diagnostics=diagnostics)
    print(gen_namespace(cfg))
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from frontmeta.config.logging import get_logger
from frontmeta.core.diagnostics import DiagnosticLog
from frontmeta.metadecoders import DEFAULT_DECODER, MetaDecoderError

from .getters import get_bool_value_checked, get_int_value_checked, get_string_value_checked
from .keys import SYNC_CONFIG_FILENAMES, SyncKeys

if TYPE_CHECKING:
    from frontmeta.config.logging import FrontmetaLogger
    from frontmeta.metadecoders import Decoder

logger: FrontmetaLogger = get_logger(__name__)

_KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    {
        SyncKeys.KEY_TOKEN,
        SyncKeys.KEY_LOGIN,
        SyncKeys.KEY_REPO,
        SyncKeys.KEY_POST_PATH,
        SyncKeys.KEY_CACHE_PATH,
        SyncKeys.KEY_MD_FORMAT,
        SyncKeys.KEY_CONCURRENCY,
        SyncKeys.KEY_ONLY_PUB,
        SyncKeys.KEY_ADAPTER,
    }
)


@dataclass(frozen=True)
class SyncConfig:
    """Immutable sync-tool settings.

    Attributes:
        token (str): API token for the remote knowledge base.
        login (str): Account (user or group) login.
        repo (str): Repository slug under ``login``.
        post_path (str): Directory that receives the generated posts.
        cache_path (str): File used to cache remote document metadata.
        md_format (str): Template for generated post file names.
        concurrency (int): Number of documents fetched in parallel.
        only_pub (bool): Sync published documents only.
        adapter (str): Output adapter (e.g. ``"markdown"``).
        source (Path | None): The file the settings were read from, if any.
    """

    token: str = ""
    login: str = ""
    repo: str = ""
    post_path: str = "yuque"
    cache_path: str = "yuque.json"
    md_format: str = "Title"
    concurrency: int = 5
    only_pub: bool = True
    adapter: str = "markdown"
    source: Path | None = field(default=None, compare=False)

    @property
    def namespace(self) -> str:
        """The remote namespace, ``"<login>/<repo>"``."""
        return gen_namespace(self)

    def merged_with(
        self,
        table: dict[str, Any],
        *,
        where: str,
        diagnostics: DiagnosticLog,
    ) -> SyncConfig:
        """Return a copy where every key present in ``table`` overrides this config.

        Unknown keys and unconvertible values are recorded as warnings and ignored.
        """
        for key in table:
            if key not in _KNOWN_KEYS:
                logger.warning("Ignoring unknown key %s.%s", where, key)
                diagnostics.add_warning(f"Ignoring unknown key {where}.{key}")

        kw: dict[str, Any] = {
            "diagnostics": diagnostics,
            "logger": logger,
            "where": where,
        }
        return replace(
            self,
            token=get_string_value_checked(table, SyncKeys.KEY_TOKEN, default=self.token, **kw),
            login=get_string_value_checked(table, SyncKeys.KEY_LOGIN, default=self.login, **kw),
            repo=get_string_value_checked(table, SyncKeys.KEY_REPO, default=self.repo, **kw),
            post_path=get_string_value_checked(
                table, SyncKeys.KEY_POST_PATH, default=self.post_path, **kw
            ),
            cache_path=get_string_value_checked(
                table, SyncKeys.KEY_CACHE_PATH, default=self.cache_path, **kw
            ),
            md_format=get_string_value_checked(
                table, SyncKeys.KEY_MD_FORMAT, default=self.md_format, **kw
            ),
            concurrency=get_int_value_checked(
                table, SyncKeys.KEY_CONCURRENCY, default=self.concurrency, **kw
            ),
            only_pub=get_bool_value_checked(
                table, SyncKeys.KEY_ONLY_PUB, default=self.only_pub, **kw
            ),
            adapter=get_string_value_checked(
                table, SyncKeys.KEY_ADAPTER, default=self.adapter, **kw
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the settings keyed as in the config files."""
        return {
            SyncKeys.KEY_TOKEN: self.token,
            SyncKeys.KEY_LOGIN: self.login,
            SyncKeys.KEY_REPO: self.repo,
            SyncKeys.KEY_POST_PATH: self.post_path,
            SyncKeys.KEY_CACHE_PATH: self.cache_path,
            SyncKeys.KEY_MD_FORMAT: self.md_format,
            SyncKeys.KEY_CONCURRENCY: self.concurrency,
            SyncKeys.KEY_ONLY_PUB: self.only_pub,
            SyncKeys.KEY_ADAPTER: self.adapter,
        }


DEFAULT_SYNC_CONFIG: Final[SyncConfig] = SyncConfig()


def gen_namespace(config: SyncConfig) -> str:
    """Return the remote namespace ``"<login>/<repo>"`` for ``config``."""
    return f"{config.login}/{config.repo}"


def load_sync_config(
    base_dir: Path | None = None,
    *,
    decoder: Decoder = DEFAULT_DECODER,
    diagnostics: DiagnosticLog | None = None,
) -> SyncConfig:
    """Load the sync configuration from ``base_dir`` (default: the CWD).

    Candidates are tried in the order of ``SYNC_CONFIG_FILENAMES``. A candidate
    that is missing is skipped; one that cannot be read or decoded is recorded
    as a warning and the next candidate is tried. Without any usable file the
    defaults are returned.

    Args:
        base_dir (Path | None): Directory holding the config files.
        decoder (Decoder): Decoder used for the config files.
        diagnostics (DiagnosticLog | None): Collects warnings; a private log is
            used when omitted.

    Returns:
        SyncConfig: Defaults overridden by the keys present in the first usable file.
    """
    root: Path = base_dir if base_dir is not None else Path.cwd()
    diags: DiagnosticLog = diagnostics if diagnostics is not None else DiagnosticLog()

    for name in SYNC_CONFIG_FILENAMES:
        path: Path = root / name
        if not path.is_file():
            logger.trace("No sync config at %s", path)
            continue
        try:
            table: dict[str, Any] = decoder.decode_file_to_mapping(path)
        except (OSError, MetaDecoderError) as exc:
            logger.warning("Cannot load sync config from %s: %s", path, exc)
            diags.add_warning(f"Cannot load sync config from {path}: {exc}")
            continue

        logger.info("Loaded sync config from %s", path)
        merged: SyncConfig = DEFAULT_SYNC_CONFIG.merged_with(
            table, where=name, diagnostics=diags
        )
        return replace(merged, source=path)

    logger.info("No sync config found in %s; using defaults", root)
    return DEFAULT_SYNC_CONFIG
