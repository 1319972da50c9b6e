"""Help content data structures for the CLI help formatter.

Defines all help text, examples, and option descriptions in a structured way.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# Style constants for consistent formatting
class HelpStyles:
    """Color and style constants for help output."""

    # Main styles
    TITLE = "bold cadet_blue"
    SUBTITLE = "pale_turquoise4"
    BORDER = "cadet_blue"

    # Section headers
    SECTION_HEADER = "bold bright_white"
    SECTION_DIM = "dim"

    # Command styles
    OPTION_COMMAND = "bold sky_blue3"
    STEP_COMMAND = "bold steel_blue3"

    EXAMPLE_TITLE = "bold light_sky_blue3"
    EXAMPLE_COMMAND = "dark_slate_gray3"

    NOTE_BULLET = "bold sky_blue3"

    # Usage line
    USAGE_HEADER = "bold bright_white"
    USAGE_PROGRAM = "white"
    USAGE_OPTIONS = "pale_turquoise4"


@dataclass
class CommandItem:
    """Represents a single command or option."""
    command: str
    description: str


@dataclass
class ExampleItem:
    """Represents a usage example."""
    title: str
    command: str


@dataclass
class HelpSection:
    """Represents a section in the help output."""
    title: str
    subtitle: str = ""
    items: list[CommandItem] = field(default_factory=lambda: [])


class HelpContent:
    """Central repository for all CLI help content."""

    APP_TITLE = "Theme Publisher"
    APP_DESCRIPTION = "Package wallpapers and clocks, update the catalog and push the repository"

    USAGE_PROGRAM = "python main.py"
    USAGE_OPTIONS_PLACEHOLDER = "[options]"

    GENERAL_OPTIONS = HelpSection(
        title="Options",
        items=[
            CommandItem(
                "--config, -c PATH",
                "Configuration file (default: PublisherConfig.json)"
            ),
            CommandItem(
                "--repo-root, -r PATH",
                "Repository to publish into, overriding the configuration"
            ),
            CommandItem(
                "--debug",
                "Write a debug log to ./logs, or ~/.theme_publisher/logs when ./logs is inside the repository"
            ),
            CommandItem(
                "--help, -h",
                "Show this help message"
            ),
        ]
    )

    PUBLISH_STEPS = HelpSection(
        title="Publishing Steps",
        subtitle="(run in order, nothing is rolled back)",
        items=[
            CommandItem("Check repository", "Create .gitignore, offer to stash other changes"),
            CommandItem("Pull", "Optionally pull the latest changes first"),
            CommandItem("Questions", "Theme id, name, tags, preview, resolution, source folder"),
            CommandItem("1. Archive", "Zip the source folder into the theme's folder"),
            CommandItem("2. Preview", "Copy the preview image into the previews folder"),
            CommandItem("3. Catalog", "Add or update the theme and resolution entries"),
            CommandItem("4. Push", "Commit everything and push to the remote"),
        ]
    )

    EXAMPLES = [
        ExampleItem(
            "Publish from the current repository:",
            "python main.py"
        ),
        ExampleItem(
            "Publish into another checkout with debug logging:",
            "python main.py --repo-root ../themes-repo --debug"
        ),
        ExampleItem(
            "Use a different configuration file:",
            "python main.py --config configs/staging.json"
        ),
    ]

    # Important Notes
    NOTES = [
        ("!", "Other uncommitted changes are stashed and restored after publishing"),
        ("i", "Republishing a resolution bumps its version and replaces its archive"),
        ("*", "Press Ctrl+C at any prompt to cancel"),
    ]
