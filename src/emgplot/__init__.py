"""Live terminal plotting of muscle-activity voltage.

Samples come from an ADS1115 on the I2C bus, from a previously captured log,
or from a random generator, and are drawn as a scrolling line chart of the
most recent window.
"""

__version__ = "0.1.0"
