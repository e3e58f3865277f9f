"""CLI package.

The ``cli`` sub-package contains the Click application and all
command implementations. It goes through the public API of the parent
package for every conversion.
"""
from __future__ import annotations
