from .base import ProfileStore, ResourceStore, RoleStore, StorageError

__all__ = ["ProfileStore", "ResourceStore", "RoleStore", "StorageError"]
