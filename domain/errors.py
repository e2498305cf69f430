class UploadError(RuntimeError):
    """Fallo al subir una imagen al proveedor (respuesta de error, red o formato)."""


class BackendNotConfiguredError(UploadError):
    """Faltan las credenciales del backend seleccionado; no se intenta la subida."""
