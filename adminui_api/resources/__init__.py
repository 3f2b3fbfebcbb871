"""Resources package."""
from adminui_api.resources.json_resource import JsonResource, ResourceCollection

__all__ = ["JsonResource", "ResourceCollection"]
