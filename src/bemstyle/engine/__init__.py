from bemstyle.engine.resolver import Resolution, Resolver, resolve

__all__ = ["Resolution", "Resolver", "resolve"]
