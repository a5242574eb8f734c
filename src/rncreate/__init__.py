"""rn-create-template - scaffold React Native components, screens, hooks and navigation."""

__version__ = "1.0.0"
