"""Print the decoded manifests stored in a rukpak Bundle's ConfigMaps."""

__version__ = "0.1.0"
