"""Generator options and YAML configuration loading.

:class:`GeneratorOptions` carries per-call switches into
``generate_component``; :func:`load_generator_config` reads the ``uidl.yaml``
file used by the command line.

Examples
--------
>>> from uidl_pages.config import GeneratorOptions
>>> GeneratorOptions().skip_validation
False
"""

from .loader import load_generator_config
from .models import GeneratorConfig, GeneratorOptions

__all__ = ["GeneratorConfig", "GeneratorOptions", "load_generator_config"]
