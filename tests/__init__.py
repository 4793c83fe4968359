"""COURSECAT test suite.

Folder taxonomy
- unit/      : Fast checks of a single module/class/function.
- contract/  : CourseCatalog behavior every implementation must share.
- e2e/       : The ``coursecat`` CLI driven through Click's CliRunner.

General guidance
- The top-level conftest marks each test after its folder (unit, contract, e2e).
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Catalog files are written under ``tmp_path`` or an isolated filesystem, never the repo.
"""
