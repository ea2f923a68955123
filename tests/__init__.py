"""EXAMPORTAL test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of one module against in-memory fakes.
- contract/     : Behavior every KeyValueStore / IdGenerator backend must share.
- integration/  : Backends against the real filesystem and SQLite.
- functional/   : What a new user sees first (help, version).
- e2e/          : The CLI driven command by command against a JSON store file.
- fixtures/     : Shared pytest plugins (no tests here).

Default markers are added per folder by each folder's conftest; property
tests add ``@pytest.mark.property`` themselves.
"""
