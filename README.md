# azenith

`azenith` is a small monitoring daemon for Android devices. Every 15 seconds it
checks which app is visible, whether the screen is awake and whether battery
saver is on. It then picks one of these performance profiles:

- **Performance** (`1`): a game from your game list is in the foreground and the
  screen is on. The game's process also gets nice priority -20 and real-time
  I/O priority.
- **ECO mode** (`3`): battery saver is enabled.
- **Balanced** (`2`): anything else.

When it starts, the daemon applies the common profile (`0`) once. After that it
only runs a profile when the choice changes, or when the boosted game has
exited and a new game session has to be checked.

A profile is applied by writing two files and then running
`/vendor/bin/AZenith_Profiler <profile number>` through `/system/bin/sh`:

| File                             | Contents                                      |
|----------------------------------|-----------------------------------------------|
| `/sdcard/config/current_profile` | profile number (`0`–`3`)                      |
| `/sdcard/config/gameinfo`        | `<package> <pid> <uid>`, or `NULL 0 0`        |

Games are listed in `/sdcard/gamelist.txt`, one pattern per line. The list is
matched with `grep -Eo -f` against the output of `dumpsys window visible-apps`.
Screen state is read from `dumpsys power`. Battery saver is read from
`settings get global low_power`, and from `dumpsys power` if that fails. After
6 failed reads in a row, a reading stops being fetched. The screen is then
taken as awake and battery saver as off.

Mobile Legends: Bang Bang has its own handling. It only counts as running when
a process whose command line contains `<package>:UnityKillsMe` exists, so the
game is not boosted while it sits in the background.

## What it does not do

The package does not include the `/vendor/bin/AZenith_Profiler` script, which
applies the actual tuning for each profile. It only runs that script. It also
relies on the device's own `dumpsys`, `grep`, `awk` and `settings` tools. It
has no configuration file and no options: paths and the interval are fixed in
`azenith.config`.

## Installation

```
pip install .
```

## Usage

Start the daemon:

```
azenith
```

On `SIGINT` or `SIGTERM` it logs the signal and exits with status 0.

There is also a logging helper for other scripts. Run it under the name
`AZenith_log` and give it a tag, a level and a message:

```
AZenith_log <TAG> <LEVEL> <MESSAGE>
```

The levels are `0`=DEBUG, `1`=INFO, `2`=WARN, `3`=ERROR and `4`=FATAL. The
tag is accepted but not used. The message words are joined with spaces and
sent to the `AZenith` logger. If fewer than two arguments are given, or the
level is outside 0–4, the helper prints usage to stderr and exits with
status 1.

All logging goes through Python's `logging` module, to the logger named
`AZenith`. The package installs no handlers of its own.

## Library use

You can also use the modules on their own:

```python
from azenith.config import is_mlbb
from azenith.process import pidof, uidof

pid = pidof("com.example.game")      # lowest PID whose cmdline contains the name, or 0
print(pid, uidof(pid) if pid else None)
print(is_mlbb("com.mobile.legends"))  # True
```

- `azenith.commands`: `execute_command`, `execute_direct` and `systemv` run
  commands. The first two return the first line of the output and raise
  `CommandError` on failure.
- `azenith.files.write2file` writes printf-style formatted content. It raises
  `ValueError` or `OSError` on failure.
- `azenith.profiler`: `run_profiler`, `get_gamestart`, and the
  `get_screenstate` and `get_low_power_state` probes, both `FallbackProbe`
  instances.
- `azenith.mlbb.MLBBHandler.handle` classifies a package as an `MLBBState`.
- `azenith.daemon.Daemon` takes every device query and action as a callable.
  `Daemon.step()` runs one check and returns the current `ProfileMode`, so the
  decision logic can be driven without a device.

## Tests

```
pip install .[test]
pytest
```