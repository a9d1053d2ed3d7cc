"""Building blocks for managing CurseForge and Modrinth Minecraft modpacks."""

__version__ = "0.1.0"

__all__ = [
    "cfversions",
    "curseforge",
    "modrinth",
    "modrinthpack",
    "mrloaders",
    "murmur2",
    "versions",
]