POLICY_HELP_TEXT = (
    "What to do with a file whose content was already seen (choose one):\n"
    "  -d, --delete       : Delete the duplicate (default)\n"
    "  -a, --ask          : Ask what to do: delete / move / ignore\n"
    "  -i, --inform       : Only print the duplicate and its SHA-256 hash\n"
    "  -m, --move DIR     : Move the duplicate into DIR\n"
)

EPILOG_TEXT = """
Examples:
  Delete duplicates in the current directory
  %(prog)s

  Report duplicates in Downloads without touching them
  %(prog)s -f ~/Downloads --inform

  Move duplicates to a holding folder
  %(prog)s -f ~/Downloads --move ~/Duplicates

  Decide per file, sending deleted files to the system trash
  %(prog)s -f ~/Downloads --ask --trash

Only files directly inside the folder are checked; subdirectories are not scanned.
The first file with a given content is kept, later ones are treated as duplicates.
"""
