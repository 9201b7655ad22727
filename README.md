# dadops

A small command line tool that fetches dad jokes, checks that the joke
service answers, seeds a local MongoDB database and serves a handful of
HTTP endpoints. It also carries a few small utility modules.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
dadops random          # print a random dad joke
dadops verify          # HEAD-check the joke service URL, then seed MongoDB
dadops serve           # start the HTTP server on port 8080
dadops --config FILE   # read settings from a YAML or JSON config file
```

Run with no command, `dadops` prints its help.

`random` fetches a joke from `https://icanhazdadjoke.com/` and prints it.

`verify` sends a HEAD request to the joke service and prints the status
line (or logs the error), then connects to `mongodb://localhost:27017`,
pings the server and inserts two sample documents into the `users`
collection of the `testing` database.

Without `--config`, the home directory is searched for `.Devops.json`,
`.Devops.yaml` or `.Devops.yml`; the first one found is read. When a
config file is read, its path is printed. An environment variable named
after a config key in upper case overrides that key's value. The
`-t/--toggle` flag is accepted but has no effect.

## HTTP server

`dadops serve` listens on port 8080 on all interfaces and answers on
these paths:

| Path        | Response                                             |
|-------------|------------------------------------------------------|
| `/hello`    | `Here is my first http program`                      |
| `/hello2`   | `Here is my second http program guys`                |
| `/headers`  | the request headers, one `Name: value` per line      |
| `/joke`     | a random dad joke                                    |
| `/metrics`  | request counts per route in Prometheus text format   |
| any other   | `Welcome to my website!`                             |

The WSGI application can also be built in code with
`dadops.server.create_app(joke_provider)`, where `joke_provider` is a
callable returning the text for `/joke`; it defaults to
`dadops.jokes.get_random_joke`. `dadops.server.render_headers(pairs)`
renders `(name, value)` pairs as `name: value` lines.

## Library modules

- `dadops.jokes`: `get_random_joke`, `fetch_joke_data`, `verify_url` and
  the `RandomJoke` dataclass with `RandomJoke.from_json(data)`.
- `dadops.database`: the `User` dataclass, `UserRepository(collection)`
  whose `insert(user)` returns the user with its stored id, and
  `setup_db(uri, timeout)`.
- `dadops.wordcount`: `word_count(text)` counts whitespace-separated words.
- `dadops.twofer`: `share_with(name)` returns `"One for <name>, one for me."`,
  with `you` for an empty name.
- `dadops.closures`: `total(*args)`, `incrementor()` and `decrementor()`.
- `dadops.carpentry`: `Board`, `Mallet`, `Crowbar`, `Toolbox` and a
  `Contractor` whose `process_boards(toolbox, boards)` drives or pulls
  nails until each board has the number it needs.
- `dadops.tree`: `branch(size, ratio, angle, iterations)` yields
  turtle-style drawing commands for a fractal tree; `draw(...)` prints and
  returns the whole drawing.
- `dadops.offers`: `Mobile` (`moto_offer`, `oppo_offer`) and `Cost`
  (`festival_offer`, `add_discount`), plus `percent_of(percent, value)`.
- `dadops.people`: `Person`, `sort_by_age`, `people_to_json` and
  `people_from_json`.

Example:

```python
from dadops.wordcount import word_count
from dadops.twofer import share_with

word_count("I ate a donut. Then I ate another donut.")
# {'I': 2, 'ate': 2, 'a': 1, 'donut.': 2, 'Then': 1, 'another': 1}

share_with("Alice")
# 'One for Alice, one for me.'
```