# minishell

A small interactive command shell for POSIX systems. It shows the current
directory in a coloured prompt and runs what you type:

- **External programs**, looked up on `PATH`. When a program cannot be
  started, the shell prints "Command not found" and lists up to three
  regular files or links on `PATH` whose names are within an edit
  distance of three of what you typed (case is ignored).
- **Pipelines** such as `ls -l | grep py | wc -l`. Stages beyond the
  tenth are ignored, and each stage may carry one redirection.
- **Redirection** of a single command with `< file`, `> file` and
  `>> file`. Outside a pipeline the operators must stand alone as words.
- **Builtins**: `cd [dir]` (including `cd -`), `pwd`, `echo [-n] args`,
  `exit [status]`, `clear`, `whoami`, `help`, `history` (the first 100
  lines entered), `env`, `export VAR=VAL`, `unset VAR`.
- **Extra commands**: `greet`, `clr`, `calculator` (reads an expression
  such as `4 + 5` and prints the result to two decimal places), `quit`,
  `sysinfo`, `findfile <pattern>` (searches below the current directory)
  and `createfile <name>`.

Words can be quoted with `'` or `"`, and a backslash escapes the
character after it. When the `readline` module is available, interactive
input gets line editing.

## Install

```
pip install .
```

## Run

```
minishell
```

The shell ends on `exit`, on `quit`, or at end of input (Ctrl-D).

## Use as a library

The parts of the shell can be used on their own:

```python
from minishell.parser import parse_pipeline, tokenize
from minishell.suggest import levenshtein_distance

tokenize('echo "hello world" a\\ b')        # ['echo', 'hello world', 'a b']
commands = parse_pipeline("sort < in.txt | uniq >> out.txt")
levenshtein_distance("gerp", "grep")        # 2
```

- `minishell.parser`: `tokenize`, `split_args`, `parse_pipeline`, the
  `Command` dataclass and `ParseError`.
- `minishell.executor.execute_pipeline` runs a list of `Command`s with
  their pipes and redirections connected and returns each stage's exit
  status.
- `minishell.builtins`: `is_builtin`, `handle_builtin`, `History` and
  `ShellExit`, which `exit` raises with its status.
- `minishell.custom`: `is_custom_command`, `handle_custom_command` and
  `calculate`.
- `minishell.suggest`: `levenshtein_distance`, `find_suggestions` and
  `suggest_commands`.
- `minishell.shell`: `Shell` runs single lines through `run_line` or the
  whole loop through `run`; also `build_prompt`, `parse_redirection`,
  `launch_external`, `run_redirection` and `main`.

## What it does not do

There is no variable expansion, globbing, job control, command
substitution, `&&`/`;` sequencing or scripting. Builtins and extra
commands run only as a plain line; inside a pipeline or with redirection
every stage is started as an external program.

## Tests

```
pip install ".[test]"
pytest
```