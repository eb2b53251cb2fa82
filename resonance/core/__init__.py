# resonance/core/__init__.py
