"""Present-imperative verbs accepted as the first word of a description."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_IMPERATIVE_VERBS: frozenset[str] = frozenset(
    {
        "accept", "access", "adapt", "add", "adjust", "align", "allow", "amend",
        "annotate", "append", "apply", "archive", "assert", "assign", "avoid",
        "backport", "batch", "bind", "block", "bootstrap", "bound", "break",
        "build", "bump", "bundle", "cache", "calculate", "call", "cancel",
        "capture", "centralize", "change", "check", "clamp", "clarify",
        "clean", "cleanup", "clear", "clone", "close", "collapse", "collect",
        "combine", "comment", "commit", "compile", "complete", "compress",
        "compute", "configure", "connect", "consolidate", "construct",
        "convert", "copy", "correct", "create", "cut", "debounce", "debug",
        "declare", "decode", "decouple", "decrease", "deduplicate", "default",
        "defer", "define", "delay", "delete", "deprecate", "derive",
        "describe", "detect", "disable", "disallow", "discard", "display",
        "document", "downgrade", "drop", "dump", "duplicate", "edit", "emit",
        "enable", "encode", "enforce", "ensure", "escape", "evaluate",
        "exclude", "expand", "expect", "explain", "export", "expose",
        "extend", "extract", "factor", "fetch", "fill", "filter", "finalize",
        "finish", "fix", "flatten", "flush", "fold", "force", "format",
        "forward", "free", "freeze", "generalize", "generate", "group",
        "guard", "handle", "harden", "hide", "hook", "ignore", "implement",
        "import", "improve", "include", "increase", "indent", "initialize",
        "inline", "insert", "install", "integrate", "introduce", "invalidate",
        "invert", "isolate", "join", "keep", "label", "launch", "limit",
        "link", "lint", "list", "load", "localize", "lock", "log", "lower",
        "make", "map", "mark", "match", "merge", "migrate", "minimize",
        "mirror", "mock", "modernize", "modify", "move", "mute", "name",
        "normalize", "note", "obey", "omit", "open", "optimize", "order",
        "organize", "override", "pad", "parallelize", "parameterize", "parse",
        "pass", "patch", "pause", "percent-encode", "persist", "pin", "place",
        "polish", "populate", "port", "prefer", "prefix", "prepare",
        "preserve", "prevent", "print", "process", "promote", "propagate",
        "protect", "provide", "prune", "publish", "pull", "purge", "push",
        "put", "query", "queue", "raise", "read", "rebase", "rebuild",
        "recalculate", "record", "recover", "redesign", "redirect", "reduce",
        "re-enable", "refactor", "refill", "refine", "reformat", "refresh",
        "register", "reimplement", "reject", "release", "reload", "remove",
        "rename", "render", "reorder", "reorganize", "repair", "replace",
        "report", "request", "require", "rerun", "reset", "reshape",
        "resize", "resolve", "restore", "restrict", "restructure", "retry",
        "return", "reuse", "revert", "review", "revise", "rewrite", "roll",
        "rollback", "rotate", "route", "run", "sanitize", "save", "scale",
        "schedule", "scope", "search", "secure", "select", "send",
        "separate", "serialize", "serve", "set", "setup", "share", "shift",
        "shorten", "show", "shrink", "silence", "simplify", "skip", "sort",
        "specify", "speed", "split", "squash", "stabilize", "standardize",
        "start", "stop", "store", "stream", "strip", "stub", "style",
        "submit", "subscribe", "support", "suppress", "swap", "switch",
        "sync", "synchronize", "tag", "test", "throttle", "throw", "tidy",
        "toggle", "track", "transform", "translate", "trigger", "trim",
        "truncate", "tune", "tweak", "unblock", "uncomment", "undo", "unify",
        "uninstall", "unlock", "unpin", "unregister", "unset", "untangle",
        "update", "upgrade", "upload", "use", "validate", "vendor", "verify",
        "wait", "warn", "watch", "whitelist", "widen", "wire", "wrap",
        "write",
    }
)


def build_allowlist(extra: Iterable[str] = (), *, include_default: bool = True) -> frozenset[str]:
    """Union the default verbs with ``extra``, lower-cased and stripped."""
    local = frozenset(verb.strip().lower() for verb in extra if verb.strip())
    if not include_default:
        return local
    return DEFAULT_IMPERATIVE_VERBS | local
