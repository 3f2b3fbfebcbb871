"""Schema-backed resources consumed by the response wrappers."""
from adminui_api.utils.pagination import Page
from adminui_api.utils.response import Result


class JsonResource:
    """A single object serialized through a marshmallow schema."""

    def __init__(self, resource, schema):
        """
        Initialize resource.

        Args:
            resource: Object or mapping to serialize
            schema: Schema class or instance used to dump the resource
        """
        self.resource = resource
        self.schema = schema() if isinstance(schema, type) else schema
        self._links = None
        self._meta = {}

    def additional(self, meta=None, **extra):
        """Merge extra keys into the meta block."""
        self._meta.update(meta or {}, **extra)
        return self

    def with_links(self, links=None, **extra):
        """Merge entries into the links block."""
        self._links = {**(self._links or {}), **(links or {}), **extra}
        return self

    def serialize(self):
        return self.schema.dump(self.resource)

    def to_result(self) -> Result:
        return Result(
            data=self.serialize(),
            links=self._links,
            meta=dict(self._meta) if self._meta else None,
        )


class ResourceCollection(JsonResource):
    """A list of objects, optionally paginated."""

    def __init__(self, resources, schema):
        """
        Initialize collection.

        Args:
            resources: Iterable of objects or a Page
            schema: Schema class or instance used to dump each item
        """
        self.page = resources if isinstance(resources, Page) else None
        items = resources.items if self.page is not None else list(resources)
        super().__init__(items, schema)

    def serialize(self):
        return self.schema.dump(self.resource, many=True)

    def to_result(self) -> Result:
        result = super().to_result()
        if self.page is None:
            return result

        return Result(
            data=result.data,
            links={**self.page.links(), **(self._links or {})},
            meta={**self.page.meta(), **self._meta},
        )
