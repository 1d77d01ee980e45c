"""Trigger corpus: the fixed catalogue of Linear keyboard shortcuts."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from models import Modifier, ShortcutDescriptor

SHORTCUTS: tuple[ShortcutDescriptor, ...] = (
    ShortcutDescriptor(
        id="go_to_inbox",
        name="Go to Inbox",
        description="Navigate to inbox view",
        voice_triggers=("go to inbox", "open inbox", "show inbox", "inbox view"),
        keys=("g", "i"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_my_issues",
        name="Go to My Issues",
        description="View issues assigned to me",
        voice_triggers=("my issues", "assigned to me", "show my tasks", "my work"),
        keys=("g", "m"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_active",
        name="Go to Active Issues",
        description="View active issues",
        voice_triggers=("active issues", "current issues", "in progress"),
        keys=("g", "a"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_backlog",
        name="Go to Backlog",
        description="Navigate to backlog view",
        voice_triggers=("backlog", "go to backlog", "show backlog", "backlog view"),
        keys=("g", "b"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_board",
        name="Go to Board",
        description="Open board view",
        voice_triggers=("board view", "kanban", "show board", "board"),
        keys=("g", "d"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_roadmap",
        name="Go to Roadmap",
        description="Navigate to roadmap",
        voice_triggers=("roadmap", "timeline", "show roadmap", "planning view"),
        keys=("g", "r"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_projects",
        name="Go to Projects",
        description="View all projects",
        voice_triggers=(
            "projects",
            "show projects",
            "project list",
            "all projects",
        ),
        keys=("g", "p"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_archive",
        name="Go to Archive",
        description="View archived issues",
        voice_triggers=("archive", "archived issues", "show archive", "completed"),
        keys=("g", "z"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_settings",
        name="Go to Settings",
        description="Open workspace settings",
        voice_triggers=(
            "settings",
            "preferences",
            "configuration",
            "workspace settings",
        ),
        keys=("g", "s"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_teams",
        name="Go to Teams",
        description="Navigate to teams view",
        voice_triggers=("teams", "show teams", "team list", "all teams"),
        keys=("g", "t"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_cycles",
        name="Go to Cycles",
        description="Navigate to cycles view",
        voice_triggers=("cycles", "go to cycles", "show cycles", "all cycles"),
        keys=("g", "c"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_active_cycle",
        name="Go to Active Cycle",
        description="Navigate to active cycle",
        voice_triggers=(
            "active cycle",
            "current cycle",
            "this cycle",
            "current sprint",
        ),
        keys=("g", "v"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_upcoming_cycle",
        name="Go to Upcoming Cycle",
        description="Navigate to upcoming cycle",
        voice_triggers=("upcoming cycle", "next cycle", "next sprint"),
        keys=("g", "w"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="go_to_all_issues",
        name="Go to All Issues",
        description="View all issues",
        voice_triggers=("all issues", "show all issues", "every issue"),
        keys=("g", "e"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="navigate_back",
        name="Go Back",
        description="Navigate to previous page",
        voice_triggers=("go back", "previous", "back", "return"),
        keys=("[",),
    ),
    ShortcutDescriptor(
        id="navigate_forward",
        name="Go Forward",
        description="Navigate to next page",
        voice_triggers=("go forward", "next", "forward"),
        keys=("]",),
    ),
    ShortcutDescriptor(
        id="open_parent_issue",
        name="Open Parent Issue",
        description="Navigate to parent issue",
        voice_triggers=("parent issue", "go to parent", "open parent"),
        keys=("ArrowUp",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="open_sub_issue",
        name="Open Sub Issue",
        description="Navigate to sub issue",
        voice_triggers=("sub issue", "go to sub issue", "open sub issue"),
        keys=("ArrowDown",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="open_favorite",
        name="Open Favorite",
        description="Quick open a favorite",
        voice_triggers=("open favorite", "favorites", "bookmarks"),
        keys=("o", "f"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="open_project",
        name="Open Project",
        description="Quick open a project",
        voice_triggers=("open project", "find project"),
        keys=("o", "p"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="open_cycle",
        name="Open Cycle",
        description="Quick open a cycle",
        voice_triggers=("open cycle", "find cycle"),
        keys=("o", "c"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="open_user",
        name="Open User",
        description="Quick open user profile",
        voice_triggers=("open user", "find user", "user profile"),
        keys=("o", "u"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="open_my_profile",
        name="Open My Profile",
        description="Open my user profile",
        voice_triggers=("my profile", "open my profile", "profile"),
        keys=("o", "m"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="open_team",
        name="Open Team",
        description="Quick open a team",
        voice_triggers=("open team", "find team"),
        keys=("o", "t"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="create_issue",
        name="Create Issue",
        description="Open create issue modal",
        voice_triggers=("new issue", "create issue", "add issue", "create new"),
        keys=("c",),
    ),
    ShortcutDescriptor(
        id="create_issue_from_template",
        name="Create from Template",
        description="Create issue from template",
        voice_triggers=("new from template", "use template", "template issue"),
        keys=("k",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="duplicate_issue",
        name="Duplicate Issue",
        description="Duplicate current issue",
        voice_triggers=("duplicate", "copy issue", "clone issue", "duplicate this"),
        keys=("d",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="delete_issue",
        name="Delete Issue",
        description="Delete current issue",
        voice_triggers=("delete issue", "remove issue", "delete this"),
        keys=("Delete",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="archive_issue",
        name="Archive Issue",
        description="Archive current issue",
        voice_triggers=("archive issue", "archive this", "move to archive"),
        keys=("e",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="copy_issue_link",
        name="Copy Issue Link",
        description="Copy link to current issue",
        voice_triggers=("copy link", "get link", "share link", "copy issue link"),
        keys=(".",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="copy_issue_id",
        name="Copy Issue ID",
        description="Copy issue ID to clipboard",
        voice_triggers=("copy id", "get id", "copy issue id", "issue identifier"),
        keys=(".",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="copy_issue_branch",
        name="Copy Git Branch Name",
        description="Copy git branch name for issue",
        voice_triggers=("copy branch", "git branch", "branch name", "get branch"),
        keys=(",",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="merge_issues",
        name="Merge Issues",
        description="Merge multiple issues",
        voice_triggers=("merge issues", "combine issues", "merge selected"),
        keys=("m",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="create_sub_issue",
        name="Create Sub-Issue",
        description="Create a sub-issue",
        voice_triggers=("create sub issue", "new sub issue", "add sub task"),
        keys=("o",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="move_to_team",
        name="Move to Team",
        description="Move issue to another team",
        voice_triggers=("move to team", "change team", "transfer team"),
        keys=("m",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="set_issue_status_1",
        name="Set Status (Quick 1)",
        description="Quick set to first status",
        voice_triggers=("quick status one",),
        keys=("1",),
        modifiers=(Modifier.PRIMARY, Modifier.ALT),
    ),
    ShortcutDescriptor(
        id="set_issue_status_2",
        name="Set Status (Quick 2)",
        description="Quick set to second status",
        voice_triggers=("quick status two",),
        keys=("2",),
        modifiers=(Modifier.PRIMARY, Modifier.ALT),
    ),
    ShortcutDescriptor(
        id="set_issue_status_3",
        name="Set Status (Quick 3)",
        description="Quick set to third status",
        voice_triggers=("quick status three",),
        keys=("3",),
        modifiers=(Modifier.PRIMARY, Modifier.ALT),
    ),
    ShortcutDescriptor(
        id="archive_or_restore",
        name="Archive/Restore Issue",
        description="Archive or restore issue",
        voice_triggers=("archive or restore", "toggle archive"),
        keys=("#",),
    ),
    ShortcutDescriptor(
        id="edit_issue",
        name="Edit Issue",
        description="Edit issue title and description",
        voice_triggers=("edit issue", "modify issue", "change issue"),
        keys=("e",),
    ),
    ShortcutDescriptor(
        id="rename_issue",
        name="Rename Issue",
        description="Quick rename issue title",
        voice_triggers=("rename", "change title", "rename issue", "edit title"),
        keys=("r",),
    ),
    ShortcutDescriptor(
        id="assign_issue",
        name="Assign Issue",
        description="Open assignee selector",
        voice_triggers=("assign", "assign issue", "set assignee", "assign to"),
        keys=("a",),
    ),
    ShortcutDescriptor(
        id="assign_to_me",
        name="Assign to Me",
        description="Assign issue to myself",
        voice_triggers=("assign to me", "take issue", "claim issue", "self assign"),
        keys=("i",),
    ),
    ShortcutDescriptor(
        id="unassign_issue",
        name="Unassign Issue",
        description="Remove assignee from issue",
        voice_triggers=("unassign", "remove assignee", "unassign issue"),
        keys=("a",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="change_status",
        name="Change Status",
        description="Open status selector",
        voice_triggers=("change status", "update status", "set status", "status"),
        keys=("s",),
    ),
    ShortcutDescriptor(
        id="change_priority",
        name="Change Priority",
        description="Set issue priority",
        voice_triggers=("set priority", "change priority", "priority", "urgent"),
        keys=("p",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="set_priority_urgent",
        name="Set Priority Urgent",
        description="Set priority to urgent",
        voice_triggers=("urgent priority", "make urgent", "highest priority"),
        keys=("1",),
    ),
    ShortcutDescriptor(
        id="set_priority_high",
        name="Set Priority High",
        description="Set priority to high",
        voice_triggers=("high priority", "make high priority"),
        keys=("2",),
    ),
    ShortcutDescriptor(
        id="set_priority_normal",
        name="Set Priority Normal",
        description="Set priority to normal",
        voice_triggers=("normal priority", "medium priority"),
        keys=("3",),
    ),
    ShortcutDescriptor(
        id="set_priority_low",
        name="Set Priority Low",
        description="Set priority to low",
        voice_triggers=("low priority", "make low priority"),
        keys=("4",),
    ),
    ShortcutDescriptor(
        id="clear_priority",
        name="Clear Priority",
        description="Remove priority from issue",
        voice_triggers=("no priority", "clear priority", "remove priority"),
        keys=("0",),
    ),
    ShortcutDescriptor(
        id="set_labels",
        name="Set Labels",
        description="Open label selector",
        voice_triggers=("add label", "set labels", "tag issue", "labels"),
        keys=("l",),
    ),
    ShortcutDescriptor(
        id="remove_label",
        name="Remove Label",
        description="Remove label from issue",
        voice_triggers=("remove label", "delete label", "clear label"),
        keys=("l",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="set_estimate",
        name="Set Estimate",
        description="Set issue estimate",
        voice_triggers=("estimate", "set estimate", "story points", "effort"),
        keys=("e",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="set_due_date",
        name="Set Due Date",
        description="Set issue due date",
        voice_triggers=("due date", "set deadline", "when due", "deadline"),
        keys=("d",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="remove_due_date",
        name="Remove Due Date",
        description="Remove issue due date",
        voice_triggers=("remove due date", "clear deadline", "no deadline"),
        keys=("d",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="add_to_cycle",
        name="Add to Cycle",
        description="Add issue to cycle/sprint",
        voice_triggers=("add to cycle", "add to sprint", "cycle", "sprint"),
        keys=("c",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="add_to_active_cycle",
        name="Add to Active Cycle",
        description="Add issue to active cycle",
        voice_triggers=("add to active cycle", "current cycle", "this cycle"),
        keys=("c",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="add_to_project",
        name="Add to Project",
        description="Add issue to project",
        voice_triggers=(
            "add to project",
            "move to project",
            "project",
            "assign project",
        ),
        keys=("p",),
    ),
    ShortcutDescriptor(
        id="set_parent",
        name="Set Parent Issue",
        description="Set parent issue relationship",
        voice_triggers=(
            "set parent",
            "make subtask",
            "parent issue",
            "link parent",
        ),
        keys=("i",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="add_comment",
        name="Add Comment",
        description="Start writing a comment",
        voice_triggers=("comment", "add comment", "write comment", "reply"),
        keys=("m",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="mark_as_blocked",
        name="Mark as Blocked",
        description="Mark issue as blocked by another",
        voice_triggers=("mark blocked", "blocked by", "is blocked"),
        keys=("m", "b"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="mark_as_blocking",
        name="Mark as Blocking",
        description="Mark issue as blocking another",
        voice_triggers=("mark blocking", "blocks", "is blocking"),
        keys=("m", "x"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="reference_related",
        name="Reference Related Issue",
        description="Reference a related issue",
        voice_triggers=("related issue", "reference issue", "link issue"),
        keys=("m", "r"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="toggle_sidebar",
        name="Toggle Sidebar",
        description="Show/hide sidebar",
        voice_triggers=(
            "toggle sidebar",
            "hide sidebar",
            "show sidebar",
            "sidebar",
        ),
        keys=("\\",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="toggle_details_sidebar",
        name="Toggle Details Sidebar",
        description="Show/hide issue details sidebar",
        voice_triggers=("details sidebar", "issue details", "show details"),
        keys=("i",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="toggle_list_board_view",
        name="Toggle List/Board View",
        description="Switch between list and board view",
        voice_triggers=("toggle view", "list board", "switch layout"),
        keys=("b",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="toggle_fullscreen",
        name="Toggle Fullscreen",
        description="Enter/exit fullscreen mode",
        voice_triggers=("fullscreen", "full screen", "maximize", "expand view"),
        keys=("f",),
    ),
    ShortcutDescriptor(
        id="zoom_in",
        name="Zoom In",
        description="Increase zoom level",
        voice_triggers=("zoom in", "bigger", "increase size", "magnify"),
        keys=("+",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="zoom_out",
        name="Zoom Out",
        description="Decrease zoom level",
        voice_triggers=("zoom out", "smaller", "decrease size", "shrink"),
        keys=("-",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="reset_zoom",
        name="Reset Zoom",
        description="Reset zoom to default",
        voice_triggers=("reset zoom", "default size", "normal size"),
        keys=("0",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="toggle_completed",
        name="Toggle Completed Issues",
        description="Show/hide completed issues",
        voice_triggers=(
            "toggle completed",
            "show completed",
            "hide completed",
            "done issues",
        ),
        keys=("h",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="change_view",
        name="Change View",
        description="Switch between view types",
        voice_triggers=("change view", "switch view", "different view"),
        keys=("v",),
    ),
    ShortcutDescriptor(
        id="group_by",
        name="Group By",
        description="Change grouping option",
        voice_triggers=("group by", "change grouping", "organize by"),
        keys=("g",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="sort_by",
        name="Sort By",
        description="Change sort order",
        voice_triggers=("sort by", "order by", "change sort"),
        keys=("s",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="toggle_filters",
        name="Toggle Filters",
        description="Show/hide filters panel",
        voice_triggers=(
            "toggle filters",
            "show filters",
            "hide filters",
            "filter panel",
        ),
        keys=("f",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="search",
        name="Search",
        description="Open search/command palette",
        voice_triggers=("search", "find", "look for", "search for", "command menu"),
        keys=("k",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="open_search_slash",
        name="Open Search (/)",
        description="Open search with slash key",
        voice_triggers=("search with slash",),
        keys=("/",),
    ),
    ShortcutDescriptor(
        id="save_or_submit",
        name="Save or Submit",
        description="Save or submit current form",
        voice_triggers=("save", "submit", "save changes"),
        keys=("Enter",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="filter_issues",
        name="Filter Issues",
        description="Open filter menu",
        voice_triggers=("filter", "filter issues", "add filter", "apply filter"),
        keys=("f",),
    ),
    ShortcutDescriptor(
        id="clear_filters",
        name="Clear Filters",
        description="Remove all filters",
        voice_triggers=(
            "clear filters",
            "remove filters",
            "reset filters",
            "no filters",
        ),
        keys=("x",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="filter_my_issues",
        name="Filter My Issues",
        description="Show only my issues",
        voice_triggers=("only my issues", "filter mine", "just my work"),
        keys=("m",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="filter_unassigned",
        name="Filter Unassigned",
        description="Show unassigned issues",
        voice_triggers=(
            "unassigned",
            "no owner",
            "not assigned",
            "available issues",
        ),
        keys=("u",),
        modifiers=(Modifier.SHIFT,),
    ),
    ShortcutDescriptor(
        id="switch_team",
        name="Switch Team",
        description="Open team switcher",
        voice_triggers=(
            "switch team",
            "change team",
            "different team",
            "team switcher",
        ),
        keys=("t",),
    ),
    ShortcutDescriptor(
        id="team_settings",
        name="Team Settings",
        description="Open team settings",
        voice_triggers=("team settings", "team config", "team preferences"),
        keys=(",",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="invite_member",
        name="Invite Team Member",
        description="Open invite dialog",
        voice_triggers=(
            "invite member",
            "add member",
            "invite someone",
            "new member",
        ),
        keys=("i",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="select_all",
        name="Select All",
        description="Select all visible issues",
        voice_triggers=("select all", "all issues", "select everything"),
        keys=("a",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="select_none",
        name="Deselect All",
        description="Clear selection",
        voice_triggers=("deselect", "clear selection", "select none", "unselect"),
        keys=("Escape",),
    ),
    ShortcutDescriptor(
        id="select_next",
        name="Move Down",
        description="Move selection down",
        voice_triggers=("next issue", "down", "select next", "move down"),
        keys=("j",),
    ),
    ShortcutDescriptor(
        id="select_previous",
        name="Move Up",
        description="Move selection up",
        voice_triggers=("previous issue", "up", "select previous", "move up"),
        keys=("k",),
    ),
    ShortcutDescriptor(
        id="move_down_arrow",
        name="Move Down (Arrow)",
        description="Move selection down with arrow key",
        voice_triggers=("arrow down",),
        keys=("ArrowDown",),
    ),
    ShortcutDescriptor(
        id="move_up_arrow",
        name="Move Up (Arrow)",
        description="Move selection up with arrow key",
        voice_triggers=("arrow up",),
        keys=("ArrowUp",),
    ),
    ShortcutDescriptor(
        id="move_right",
        name="Move Right",
        description="Move selection right",
        voice_triggers=("move right", "right"),
        keys=("ArrowRight",),
    ),
    ShortcutDescriptor(
        id="move_left",
        name="Move Left",
        description="Move selection left",
        voice_triggers=("move left", "left"),
        keys=("ArrowLeft",),
    ),
    ShortcutDescriptor(
        id="select_item",
        name="Select Item",
        description="Select item in list",
        voice_triggers=("select", "select item", "check"),
        keys=("x",),
    ),
    ShortcutDescriptor(
        id="open_selected",
        name="Open Selected",
        description="Open selected issue",
        voice_triggers=("open", "open issue", "view issue", "show details"),
        keys=("Enter",),
    ),
    ShortcutDescriptor(
        id="open_selected_o",
        name="Open Selected (O)",
        description="Open focused item with O key",
        voice_triggers=("open with o",),
        keys=("o",),
    ),
    ShortcutDescriptor(
        id="open_in_new_tab",
        name="Open in New Tab",
        description="Open issue in new tab",
        voice_triggers=("new tab", "open in tab", "separate tab"),
        keys=("Enter",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="peek_issue",
        name="Peek Issue",
        description="Peek into issue (hover and hold space)",
        voice_triggers=("peek", "preview", "quick view"),
        keys=(" ",),
    ),
    ShortcutDescriptor(
        id="show_shortcuts",
        name="Show Shortcuts",
        description="Display keyboard shortcuts",
        voice_triggers=(
            "show shortcuts",
            "help",
            "keyboard shortcuts",
            "shortcuts help",
        ),
        keys=("?",),
    ),
    ShortcutDescriptor(
        id="undo",
        name="Undo",
        description="Undo last action",
        voice_triggers=("undo", "revert", "go back", "undo that"),
        keys=("z",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="redo",
        name="Redo",
        description="Redo last undone action",
        voice_triggers=("redo", "redo that", "restore"),
        keys=("z",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="refresh",
        name="Refresh",
        description="Refresh current view",
        voice_triggers=("refresh", "reload", "update view", "sync"),
        keys=("r",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="toggle_dark_mode",
        name="Toggle Dark Mode",
        description="Switch between light/dark theme",
        voice_triggers=("dark mode", "light mode", "toggle theme", "switch theme"),
        keys=("l",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="open_preferences",
        name="Open Preferences",
        description="Open user preferences",
        voice_triggers=("preferences", "settings", "my settings", "config"),
        keys=(",",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="logout",
        name="Logout",
        description="Sign out of Linear",
        voice_triggers=("logout", "sign out", "log out"),
        keys=("q",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="bold_text",
        name="Bold",
        description="Make text bold",
        voice_triggers=("bold", "make bold", "bold text"),
        keys=("b",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="italic_text",
        name="Italic",
        description="Make text italic",
        voice_triggers=("italic", "make italic", "italicize"),
        keys=("i",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="strikethrough_text",
        name="Strikethrough",
        description="Strike through text",
        voice_triggers=("strikethrough", "strike", "cross out"),
        keys=("x",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="insert_link",
        name="Insert Link",
        description="Add hyperlink",
        voice_triggers=("add link", "insert link", "hyperlink"),
        keys=("k",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="insert_code",
        name="Insert Code",
        description="Format as code",
        voice_triggers=("code", "inline code", "code format"),
        keys=("e",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="insert_code_block",
        name="Insert Code Block",
        description="Add code block",
        voice_triggers=("code block", "multiline code", "snippet"),
        keys=("c",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="bullet_list",
        name="Bullet List",
        description="Create bullet list",
        voice_triggers=("bullet list", "unordered list", "bullets"),
        keys=("8",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="numbered_list",
        name="Numbered List",
        description="Create numbered list",
        voice_triggers=("numbered list", "ordered list", "numbers"),
        keys=("9",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="underline_text",
        name="Underline",
        description="Underline text",
        voice_triggers=("underline", "underline text"),
        keys=("u",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="blockquote",
        name="Blockquote",
        description="Create blockquote",
        voice_triggers=("blockquote", "quote", "quotation"),
        keys=(">",),
        modifiers=(Modifier.PRIMARY,),
    ),
    ShortcutDescriptor(
        id="heading_1",
        name="Heading 1",
        description="Format as heading 1",
        voice_triggers=("heading one", "h1", "large heading"),
        keys=("1",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="heading_2",
        name="Heading 2",
        description="Format as heading 2",
        voice_triggers=("heading two", "h2", "medium heading"),
        keys=("2",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="heading_3",
        name="Heading 3",
        description="Format as heading 3",
        voice_triggers=("heading three", "h3", "small heading"),
        keys=("3",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="todo_list",
        name="Todo List",
        description="Create todo/checkbox list",
        voice_triggers=("todo list", "checkbox list", "task list"),
        keys=("7",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
    ShortcutDescriptor(
        id="attach_file",
        name="Attach File",
        description="Attach image or file",
        voice_triggers=("attach file", "upload file", "add attachment"),
        keys=("a",),
        modifiers=(Modifier.PRIMARY, Modifier.SHIFT),
    ),
)

_BY_ID = {shortcut.id: shortcut for shortcut in SHORTCUTS}


def list_shortcuts() -> tuple[ShortcutDescriptor, ...]:
    return SHORTCUTS


def find_shortcut_by_id(shortcut_id: str) -> Optional[ShortcutDescriptor]:
    return _BY_ID.get(shortcut_id)


def iter_triggers(
    shortcuts: Iterable[ShortcutDescriptor] = SHORTCUTS,
) -> Iterator[tuple[ShortcutDescriptor, str]]:
    """Yield ``(shortcut, trigger)`` pairs in catalogue order."""
    for shortcut in shortcuts:
        for trigger in shortcut.voice_triggers:
            yield shortcut, trigger
