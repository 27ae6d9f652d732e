"""hue-presets: browse and activate Philips Hue scenes from the terminal."""

__version__ = "0.1.0"
