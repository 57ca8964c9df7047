# cleanout

`cleanout` scans a directory and removes files older than a given number of
days. Use it to keep temp and cache folders small. A dry-run mode lists
what would be deleted without deleting anything. Each run is recorded in
a log file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Running `cleanout` with no command prints the help.

### Cleaning a directory

```
cleanout clean [--path DIR] [--days N] [--dry-run] [--verbose]
```

| Option      | Default                   | Meaning                                     |
|-------------|---------------------------|---------------------------------------------|
| `--path`    | the system temp directory | Directory to scan (`~` is expanded)         |
| `--days`    | `7`                       | Delete files older than this many days      |
| `--dry-run` | off                       | Only list the files that would be deleted   |
| `--verbose` | off                       | Report every file and directory as it is scanned |

Examples:

```
# Delete files older than 7 days from the system temp directory
cleanout clean

# List what would be deleted, and delete nothing
cleanout clean --dry-run

# Delete files older than 30 days
cleanout clean --days 30

# Clean a folder of your own, deleting files older than 14 days, with full output
cleanout clean --path ~/Downloads --days 14 --dry-run --verbose
```

If the path does not exist, an error is printed. If the path contains
spaces, there is also a hint to put it in double quotes.

The tree is walked recursively in name order. Symbolic links are not
followed. Directories are counted as checked but are never removed. Any
other entry whose modification time is older than the cut-off is deleted,
or in dry-run mode listed as `[DRY-RUN] Would delete: ...`. Entries that
cannot be read are skipped. Failed deletions are reported and counted.

At the end of a run two reports are printed. The first is an operation
summary with start and end time, duration, entries scanned, the total size
of the deleted files and the deletion counts. The second is a short
overview: files checked, files deleted (or marked for deletion in a dry
run), and how many could not be deleted.

### Log files

Each `clean` run writes a log to `logs/` in the current directory. Normal
runs go to `cleanup_YYYYMMDD_HHMMSS.log` and dry runs go to
`cleanup_dry_run_YYYYMMDD_HHMMSS.log`. The log lists the directories
scanned and every deletion (`DELETE`, or `WOULD_DELETE` in a dry run),
along with the error message for any failed deletion. It ends with a
summary of entries scanned, data processed, and successful and failed
deletions. If the log cannot be written, the run still succeeds. With
`--verbose` a warning is printed.

### Cleaning old logs

```
cleanout clean-logs [--days N]
```

This removes files under `logs/` (recursively) that are older than `N`
days. The default is 7.

```
cleanout clean-logs --days 14
```

## Using it from Python

```python
from cleanout.cleaner import clean_directory

result = clean_directory("/tmp", days=30, dry_run=True, verbose=False)
print(result.files_checked, result.files_marked_for_deletion, result.files_actually_deleted)
```

`clean_directory` returns a `CleanResult`. If the directory cannot be
reached, it raises `PathNotAccessibleError`, which is a subclass of
`OSError`. Like the command, it prints its reports and writes a log to
`logs/`.

`cleanout.cli.clean_logs(logs_dir, days)` deletes old files from a log
directory. It returns the number of deletions attempted.

`cleanout.logger` holds the pieces behind the log:

- `Logger` records operations with `log_file_operation`. It also provides
  `finalize_summary`, `print_summary` and `save_log_to_file(log_dir)`. The
  last one returns the path of the written file.
- `format_bytes` turns a byte count into a readable size in binary units.
  For example, `format_bytes(1536)` gives `"1.5 KB"`.
- `is_path_accessible(path)` tells whether a path can be stat'ed.
- `get_file_age(path)` returns a file's age in days from its modification time.