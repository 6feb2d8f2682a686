# simplejudge

A small interactive judge for the terminal. Users sign up and log in, browse
a list of problems, pick one at random, and submit a C++ source file. The file
is compiled with `g++`, run on the problem's input file, and its output is
compared with the problem's expected output.

## Installing

```
pip install .
```

Submitting code needs `g++` on your `PATH`.

## Running

```
simplejudge
```

Options:

| Option            | Default                     |
|-------------------|-----------------------------|
| `--user-data`     | `./data/user/user.csv`      |
| `--problem-data`  | `./data/problem/problem.csv`|
| `--login-message` | `./data/msg/login.txt`      |

File formats:

| File           | Contents                                                  |
|----------------|-----------------------------------------------------------|
| user data      | one `username,password` per line                          |
| problem data   | one `title,input path,output path,magic number` per line  |
| login message  | a banner shown after the data has loaded                  |

On start the screen is cleared and the users and problems are loaded. A
missing user file is reported on standard error and the session goes on with
no users; problem data that cannot be read ends the program with exit status
1. A missing login message is reported and skipped.

Then a user name is asked for. Enter `-1` at that prompt to sign up a new
account (name, then the password twice); new accounts are written back to the
user data file straight away. A user gets three tries at the password before
being sent back to the user name prompt.

Once logged in, the menu offers:

1. Who am I
2. Query judge version
3. List all problems (lettered `A`, `B`, `C`, ...)
4. Pick a random problem and submit code for it
5. Submit code for a problem of your choice, then end the session
6. Add a new problem (only for the user named `admin`); asks for the input
   path, output path, magic number and title, then rewrites the problem data
   file
7. Clear the screen and exit

A menu answer must begin with a single digit from 1 to 7; anything else is
reported as an invalid operation. The session also ends when input runs out.

A submission is compiled into an executable named `test` in the current
directory and reports `Accepted`, `Wrong Answer` or `Compiler Error!`.

## Using it from Python

Each interactive class takes the streams it reads from and writes to, so it
can be driven by `io.StringIO` objects:

```python
import io
from simplejudge.users import AccountSystem
from simplejudge.problems import ProblemSystem
from simplejudge.menu import Operation, parse_operation, render_menu
from simplejudge.random_generator import RandomGenerator

accounts = AccountSystem(io.StringIO(), io.StringIO())
accounts.load("data/user/user.csv")      # FileNotFoundError if missing
user = accounts.search("admin")          # a User, or None

problems = ProblemSystem(io.StringIO(), io.StringIO())
problems.load("data/problem/problem.csv")  # ProblemDataError if unreadable
for problem in problems.problems:
    print(problem.title, problem.input_path, problem.output_path)

print(render_menu())
assert parse_operation("3") is Operation.LIST_PROBLEMS
assert parse_operation("12") is None

picker = RandomGenerator(2)
index = picker.next(5)                   # in range(5)
```

- `simplejudge.users`: `User` and `AccountSystem` (`load`, `save`, `search`,
  `add_user`, `sign_up`, `login`).
- `simplejudge.problems`: `Problem`, `ProblemSystem` (`load`, `add_problem`,
  `save`, `prompt_new_problem`) and `ProblemDataError`.
- `simplejudge.random_generator`: `RandomGenerator(capacity, rng=None)`;
  `next(n)` returns an index in `range(n)`, redrawing indices among the last
  `capacity` picks while fewer than `n` are remembered. It raises `ValueError`
  when `n` is not positive.
- `simplejudge.menu`: `Operation`, `render_menu()` and `parse_operation(text)`.
- `simplejudge.judge`: `JudgeSystem` (`load_data`, `judge`, `random_problem`,
  `step`) and `main`, the entry point behind the `simplejudge` command.

## What it does not do

- Submissions run with no sandbox, time limit or memory limit.
- Passwords are stored and compared as plain text.
- Output is compared exactly, line by line; there is no tolerance for
  whitespace differences.