# scenes/errors.py

class SceneConfigError(ValueError):
    """Raised for invalid scene, camera or render configuration, before any tracing starts."""
