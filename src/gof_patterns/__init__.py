"""GoF Patterns - a companion library for the Gang-of-Four design pattern catalog.

Each of the 23 patterns lives in its own module under ``creational``,
``structural`` or ``behavioral`` and has no dependency on any other pattern.
Every module exposes a ``demo()`` function returning the lines its classic
example would print; the ``catalog`` package indexes them and the ``cli``
package runs them from the command line.
"""

__version__ = "1.0.0"
