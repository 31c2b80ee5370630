# argusui

Terminal rendering components for a dashboard that tracks coding-agent tasks
and the git worktrees they run in. Every view renders to a plain string with
ANSI colour codes, so the pieces can be composed into any full-screen
terminal program.

## Installation

```
pip install argusui
```

## What it provides

- `argusui.theme`: `Style`, `Theme` and `default_theme()` for the colour
  scheme, plus `bordered_panel`, `clamp_modal_width`, `visible_width` and
  `truncate_ansi` for working with ANSI-styled text.
- `argusui.scrollstate`: `ScrollState`, a cursor and scroll offset for
  scrollable lists.
- `argusui.models`: `Status`, `Task`, `Project`, `StatusCounts` and
  `count_statuses`.
- `argusui.tasklist`: `TaskList`, tasks grouped under collapsible project
  headers (one project expanded at a time), with filtering via
  `set_filter` and animated status icons; also `Row`, `RowKind` and
  `project_priority`.
- `argusui.projectlist`: `ProjectList`, `ProjectEntry` and
  `sort_projects`, a list of configured projects with per-status task counts.
- `argusui.statusbar`: `StatusBar`, the bottom bar with task counts,
  key hints and error messages.
- `argusui.taskdetail`: `TaskDetail`, the side panel showing a task's
  metadata and prompt, and `wrap_text`.
- `argusui.sidebyside`: the diff data classes (`DiffLineType`,
  `SideBySideLine`, `DiffLine`, `Hunk`, `ParsedDiff`) and their rendering
  (`render_side_by_side`, `render_unified_lines`, `render_unified`,
  `render_diff_header`, `format_side_content`, `format_line_num`,
  `truncate_plain`).
- `argusui.vtrender`: turning rows of terminal screen cells (`Cell`,
  `CellMode`) back into ANSI lines (`render_line`, `build_sgr`,
  `sgr_color`), plus `strip_ansi` and `estimate_vt_rows`.
- `argusui.worktree`: helpers to find and remove git worktrees and branches
  (`discover_worktree`, `remove_worktree`, `remove_worktree_and_branch`,
  `delete_branch`, `delete_remote_branch`, `is_worktree_subdir`,
  `dir_exists`) and `kill_stale_process`. The git helpers run `git` as a
  subprocess; `remove_worktree` never touches a path outside a
  `.argus/worktrees/` or `.claude/worktrees/` directory.

## Example

```python
from argusui.models import Status, Task
from argusui.tasklist import TaskList
from argusui.statusbar import StatusBar
from argusui.theme import default_theme

theme = default_theme()
tasks = [
    Task(id="t1", name="Fix login bug", project="webapp", status=Status.IN_PROGRESS),
    Task(id="t2", name="Update docs", project="webapp"),
]

task_list = TaskList(theme)
task_list.set_size(60, 20)
task_list.set_tasks(tasks)
task_list.set_running(["t1"])
print(task_list.view())

bar = StatusBar(theme)
bar.width = 80
bar.tasks = tasks
bar.set_running(["t1"])
print(bar.view())
```

Move through the list with `task_list.cursor_down()` and
`task_list.cursor_up()`; `task_list.selected()` returns the task under the
cursor.

## What it does not do

- There is no application, event loop or command: the package renders
  views to strings, and reading keys and drawing the screen are left to
  the caller.
- Tasks and projects are not stored anywhere; callers hand them to the
  views.
- No agent processes are started or attached to.
- Diff lines are not syntax-highlighted; they are coloured by whether they
  were added, removed or kept. Diffs are not parsed from git output either:
  the renderers take `ParsedDiff` and `SideBySideLine` values.
- `argusui.vtrender` does not emulate a terminal; it renders cells that the
  caller already has.

## Running the tests

```
pip install -e ".[test]"
pytest
```