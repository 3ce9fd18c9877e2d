"""helperkit test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with the filesystem and subprocesses.
- e2e/          : The ``helperkit`` CLI driven through click's CliRunner.

General guidance
- Keep unit fast and deterministic; HTTP services are replaced by httpx.MockTransport.
- Integration uses ``tmp_path`` and real processes with realistic setup/teardown.
- e2e asserts user-observable output and exit codes, not internals.
- Property-based tests (hypothesis) live with the layer they exercise.
- Markers: unit, integration, e2e (added by each folder's conftest)
"""
