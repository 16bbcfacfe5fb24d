"""Short-link engine: code generation, uniqueness and resolution."""

from .shortcode import CodeGenerator
from .resolver import RedirectTarget, Resolver
from .service import CreatedLink, LinkService

__all__ = ["CodeGenerator", "CreatedLink", "LinkService", "RedirectTarget", "Resolver"]

__version__ = "1.0.0"
