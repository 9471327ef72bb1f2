# gobox

gobox helps you fetch, track and reuse Go packages. Every package you
install through it is recorded with how often and when you last used it,
so a new project can start from the packages you rely on most.

It needs the `go` toolchain on your `PATH`; installing runs `go get` and
project setup runs `go mod init`.

## Installation

```
pip install gobox
```

## Usage

Fetch a package into the current module and remember it. If there is no
`go.mod` in the current directory, gobox asks whether to create one
(named after the directory) first:

```
gobox get github.com/spf13/cobra
```

Start a new project:

```
gobox init myproject
```

Without a name, the current directory is used. The directory must be
empty or not exist yet. gobox asks for the module name (defaulting to the
directory name), runs `go mod init`, then lists the remembered packages,
most recently used first, and installs the ones you pick by number
(separated by commas or spaces; leave blank for none).

List remembered packages, most recently used first, with the time of last
use and how many times each was installed:

```
gobox list
```

Forget a package. gobox lists the remembered packages, least recently used
first, asks you to pick one by number and to confirm. The package stays
installed in any project that already uses it:

```
gobox remove
```

## Storage

The record lives in `packages.json` in a `gobox` directory inside your
user configuration directory: `$XDG_CONFIG_HOME` or `~/.config` on Linux
and other Unix systems, `~/Library/Application Support` on macOS and
`%APPDATA%` on Windows. The directory and an empty list are created on
every run if they are missing.

From Python, `gobox.storage.PackageStore` reads and writes the same file;
pass it a directory to keep the record elsewhere.

## Development

```
pip install -e ".[test]"
pytest
```