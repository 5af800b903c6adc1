from evoforage.config.resolvers import register_resolvers

__all__ = ["register_resolvers"]
