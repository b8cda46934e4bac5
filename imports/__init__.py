"""
CSV bulk import for event data.

The pipeline is split into focused modules:

* **tokenizer** - quote-aware CSV text to header-keyed raw rows.
* **normalizers** - per-kind candidate-key tables and Pydantic canonical rows.
* **resolver** - ``NameIndex``, call-scoped ``ResolutionScope`` and ``EntityResolver``.
* **collaborators** - persistence adapters onto the ``events`` models and relation writers.
* **pipeline** - ``bulk_import`` orchestrator and per-kind ``bulk_create_*`` wrappers.
* **csv_templates** - example CSV files per entity kind.
* **context** - ``ImportContext`` frozen dataclass (typed Parameter Object).
* **mixins** - ``LoggingMixin`` and ``ReportMixin`` for the management commands.
* **types** / **errors** - shared enums, ``ImportResult`` and the exception hierarchy.
"""
