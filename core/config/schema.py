"""Configuration schema for nyaa."""

from dataclasses import dataclass, field, fields


@dataclass
class CmdConfig:
    """Run an arbitrary shell command for each download."""

    cmd: str = "curl {torrent} > ~/{file}"
    shell_cmd: str = "sh -c"  # e.g. "powershell.exe -Command" on Windows


@dataclass
class DefaultAppConfig:
    """Hand the link to the system's registered torrent handler."""

    use_magnet: bool = True


@dataclass
class QbitConfig:
    """qBittorrent WebUI settings."""

    base_url: str = "http://localhost:8080"
    username: str = "admin"
    password: str = "adminadmin"
    use_magnet: bool = True
    savepath: str | None = None
    category: str | None = None
    tags: str | None = None
    paused: bool = False


@dataclass
class TransmissionConfig:
    """Transmission RPC settings."""

    base_url: str = "http://localhost:9091/transmission/rpc"
    username: str | None = None
    password: str | None = None
    use_magnet: bool = True
    download_dir: str | None = None
    paused: bool = False


@dataclass
class DownloadConfig:
    """Save the .torrent file to disk."""

    save_dir: str = "~/Downloads"
    overwrite: bool = True


@dataclass
class ClipboardConfig:
    """Copy the link to the clipboard."""

    use_magnet: bool = True


@dataclass
class ClientsConfig:
    """Per-client settings, keyed by client."""

    cmd: CmdConfig = field(default_factory=CmdConfig)
    default_app: DefaultAppConfig = field(default_factory=DefaultAppConfig)
    qbit: QbitConfig = field(default_factory=QbitConfig)
    transmission: TransmissionConfig = field(default_factory=TransmissionConfig)
    download: DownloadConfig = field(default_factory=DownloadConfig)
    clipboard: ClipboardConfig = field(default_factory=ClipboardConfig)

    def to_dict(self) -> dict:
        return {f.name: _section_to_dict(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "ClientsConfig":
        if not isinstance(data, dict):
            raise TypeError("clients must be a mapping")
        sections = {}
        for f in fields(cls):
            section_cls = f.default_factory
            sections[f.name] = _section_from_dict(section_cls, data.get(f.name, {}))
        return cls(**sections)


@dataclass
class AppConfig:
    """User configuration, applied to the initial application state."""

    theme: str = "Default"
    default_source: str = "Nyaa"
    default_client: str = "Command"
    default_category: str = "0_0"
    default_filter: str = "No Filter"
    default_sort: str = "Date"
    default_sort_dir: str = "desc"
    default_search: str = ""
    clients: ClientsConfig = field(default_factory=ClientsConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary for YAML serialization."""
        return {
            "theme": self.theme,
            "default_source": self.default_source,
            "default_client": self.default_client,
            "default_category": self.default_category,
            "default_filter": self.default_filter,
            "default_sort": self.default_sort,
            "default_sort_dir": self.default_sort_dir,
            "default_search": self.default_search,
            "clients": self.clients.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """Create from dictionary (YAML deserialization).

        Missing keys take their defaults; unknown keys are ignored.
        Raises ``TypeError`` or ``ValueError`` for values of the wrong type.
        """
        if not isinstance(data, dict):
            raise TypeError("config root must be a mapping")
        defaults = cls()
        values = {}
        for key in (
            "theme",
            "default_source",
            "default_client",
            "default_category",
            "default_filter",
            "default_sort",
            "default_sort_dir",
            "default_search",
        ):
            value = data.get(key, getattr(defaults, key))
            if value is None:
                value = ""
            if not isinstance(value, (str, int)):
                raise TypeError(f"{key} must be a string")
            values[key] = str(value)
        if values["default_sort_dir"].lower() not in ("asc", "desc"):
            raise ValueError(f"default_sort_dir must be 'asc' or 'desc', not {values['default_sort_dir']!r}")
        return cls(clients=ClientsConfig.from_dict(data.get("clients") or {}), **values)


def _section_to_dict(section) -> dict:
    return {f.name: getattr(section, f.name) for f in fields(section)}


def _section_from_dict(section_cls, data):
    if not isinstance(data, dict):
        raise TypeError(f"{section_cls.__name__} must be a mapping")
    defaults = section_cls()
    values = {}
    for f in fields(section_cls):
        default = getattr(defaults, f.name)
        value = data.get(f.name, default)
        if isinstance(default, bool) and not isinstance(value, bool):
            raise TypeError(f"{f.name} must be true or false")
        if isinstance(default, str) and value is not None and not isinstance(value, str):
            raise TypeError(f"{f.name} must be a string")
        values[f.name] = value
    return section_cls(**values)
