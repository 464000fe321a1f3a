"""
The core package contains base application components.

This package includes the pieces the extractor is built from: configuration
values, field specifications and the error taxonomy.

Modules:
    models: Immutable extractor configuration, field specs and run progress.
    exceptions: Errors raised while scraping.
"""
