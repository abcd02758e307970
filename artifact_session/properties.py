"""Configuration property keys understood by repository connectors."""


class ConfigurationProperties:
    """Well-known keys of the session configuration properties."""

    PREFIX_AETHER = "aether."
    PREFIX_CONNECTOR = PREFIX_AETHER + "connector."

    USER_AGENT = PREFIX_CONNECTOR + "userAgent"
    INTERACTIVE = PREFIX_AETHER + "interactive"

    # Per-server keys, suffixed with the server id
    WAGON_CONFIG = PREFIX_CONNECTOR + "wagon.config."
    FILE_MODE = PREFIX_CONNECTOR + "perms.fileMode."
    DIR_MODE = PREFIX_CONNECTOR + "perms.dirMode."

    @classmethod
    def wagon_config(cls, server_id: str) -> str:
        return cls.WAGON_CONFIG + server_id

    @classmethod
    def file_mode(cls, server_id: str) -> str:
        return cls.FILE_MODE + server_id

    @classmethod
    def dir_mode(cls, server_id: str) -> str:
        return cls.DIR_MODE + server_id
