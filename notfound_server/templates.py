#!/usr/bin/env python3
"""
Startup-time HTML template cache with literal placeholder substitution.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from markupsafe import escape

from notfound_server.config import ERROR_MESSAGES

logger = logging.getLogger(__name__)


class TemplateLoadError(RuntimeError):
    """Raised when a template file cannot be loaded at startup"""

    def __init__(self, name: str, path: Path, reason: str):
        self.name = name
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {name} ({path})")


class TemplateLoader:
    """Loads HTML templates once and renders them by placeholder substitution.

    Placeholders use the ``{{ name }}`` form. Only the keys passed to
    :meth:`render` are replaced; any other placeholder stays in the output.
    This is a view layer, not a templating language.
    """

    def __init__(self) -> None:
        self._templates: Dict[str, str] = {}

    @property
    def templates(self) -> Mapping[str, str]:
        return MappingProxyType(self._templates)

    def load_template(self, name: str, file_path: Union[str, Path]) -> str:
        """Load a template from disk and cache it under ``name``

        Args:
            name: Cache key for the template
            file_path: Path to the template file

        Returns:
            The loaded template content

        Raises:
            TemplateLoadError: If the file is missing or unreadable
        """
        path = Path(file_path)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateLoadError(name, path, ERROR_MESSAGES["template_missing"]) from e
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateLoadError(name, path, ERROR_MESSAGES["template_unreadable"]) from e

        self._templates[name] = content
        logger.info(f"Template loaded: {name} from {path}")
        return content

    def get_template(self, name: str) -> Optional[str]:
        return self._templates.get(name)

    def render(self, name: str, variables: Optional[Mapping[str, str]] = None) -> str:
        """Render a cached template, substituting ``{{ key }}`` placeholders

        Values are HTML-escaped before insertion, so a value containing
        ``&``, ``<``, ``>``, ``"`` or ``'`` appears in the output as its
        entity form (``a&b`` renders as ``a&amp;b``). Callers that need the
        raw value must carry it elsewhere, such as a response header.

        Raises:
            KeyError: If no template is cached under ``name``
        """
        template = self._templates.get(name)
        if template is None:
            raise KeyError(name)

        for key, value in (variables or {}).items():
            template = template.replace(f"{{{{ {key} }}}}", str(escape(value)))

        return template
