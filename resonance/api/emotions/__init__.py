# resonance/api/emotions/__init__.py
