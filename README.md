# lumaprism

Analyze and clean PrismLauncher disk usage.

`luma` scans a PrismLauncher data directory, reports where the space goes
and moves reclaimable files to the trash. Cleaning is a dry run unless you
pass `--apply`.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Usage

On macOS the root defaults to `~/Library/Application Support/PrismLauncher`
and on Windows to `PrismLauncher` in the roaming application-data
directory. On other systems there is no default, so pass `--path`.

```
luma scan                         # reclaimable storage report
luma scan --instance MyPack       # restrict to one or more instances (repeatable)
luma scan --all-instances         # skip the interactive instance selection

luma clean                        # dry run of the safe targets
luma clean --dry-run              # same, stated explicitly
luma clean --apply                # move targets to the trash (asks first)
luma clean --apply --yes          # no confirmation prompt
luma clean --kind instance --min-size 500MB --older-than-days 30
luma clean --include-unused-libraries --include-unused-assets --select

luma mods                         # identical mod jars across instances
luma worlds --breakdown           # world sizes, split by region/playerdata/...
luma usage                        # size of each instance

luma config --show                # print the configuration
luma config --lang ja             # set the output language (en or ja)
luma config                       # choose the language interactively
```

Global options, accepted before or after the command:

- `--path PATH` – PrismLauncher root directory
- `--json` – print JSON instead of a report (also disables all prompts and
  status lines)
- `-v`, `--verbose` – print the resolved root and turn on debug logging
- `--log-level {error,warn,info,debug,trace}` – logging level (default `warn`)
- `--version` – print the version

`luma` exits with status 1 and an `error:` message on stderr when a command
fails.

### scan

Reports three sections: the safe cleanup targets with their sizes, library
files that no JSON under `meta/` or `instances/` references, and asset
objects whose hash is listed in no index under `assets/indexes/`. When
there are several instances and neither `--instance`, `--all-instances` nor
`--json` is given, you are asked which instances to include; answer with
numbers or ranges such as `1,3-4`, `all` or `none`. On a terminal the
report is shown page by page (Right/j/l next, Left/h/k previous, q/Enter/Esc
to quit); otherwise it is printed whole.

### clean

Safe targets are the global `cache`, `logs`, `meta` and `catpacks`
directories, plus each instance's `.minecraft/logs` and
`.minecraft/crash-reports`. With `--include-unused-libraries` (at most 2000
of the largest) and `--include-unused-assets` (at most 5000 of the largest)
those files are added as targets of kind `advanced`.

Filters:

- `--kind KIND` – keep only `global`, `instance` or `advanced` targets
  (repeatable)
- `--min-size SIZE` – minimum size, e.g. `1024`, `500MB`, `2 GiB`; the
  suffixes `b`, `k`/`kb`/`kib`, `m`/`mb`/`mib`, `g`/`gb`/`gib` and
  `t`/`tb`/`tib` all use powers of 1024
- `--older-than-days N` – keep only targets last modified at least N days ago
- `--select` – pick from the filtered targets interactively (all marked by
  default)

Targets are processed largest first. Any target that does not resolve to a
location inside the root is refused and reported as failed.

### mods, worlds, usage

`mods` groups `.jar` files under each instance's `.minecraft/mods` by
content hash and reports every group found more than once, with the space
the extra copies take. `worlds` lists each world under `.minecraft/saves`
by size; `--breakdown` splits it into `region`, `playerdata`, `poi`, `data`,
`entities`, `advancements`, `stats`, `DIM*`, `dimensions` and `other`.
`usage` lists the size of each instance directory.

## Configuration

The output language is stored as JSON in `luma-prism/config.json` inside
your user configuration directory. English is used when the file does not
exist.

## Trash

On macOS targets go to `~/.Trash`; on other Unix systems to the
freedesktop trash (`$XDG_DATA_HOME/Trash`, by default
`~/.local/share/Trash`), with a `.trashinfo` record for each item.

## Limitations

- Moving to the Windows Recycle Bin is not supported: on Windows every
  target of `luma clean --apply` is reported as failed and nothing is
  removed. Dry runs and all reports work.
- There is no default PrismLauncher location outside macOS and Windows.
- `mods`, `worlds` and `usage` always cover every instance.
- Duplicate mods are only reported, never removed.