from .u301_client import U301ApiClient

__all__ = ['U301ApiClient']
