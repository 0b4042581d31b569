from multieff.level1_cesk.frames import (
    AppArgFrame,
    AppFnFrame,
    IfFrame,
    LetFrame,
    SeqFrame,
)
from multieff.level1_cesk.kontinuation import (
    EMPTY_K,
    KNode,
    Kontinuation,
    iter_frames,
    k_from_frames,
    k_to_list,
    push_frame,
    push_frames,
)
from multieff.level1_cesk.state import (
    Apply,
    CESKState,
    Control,
    Done,
    TermControl,
    Value,
)
from multieff.level1_cesk.step import cesk_step
from multieff.level1_cesk.terms import App, If, Lam, Let, LetRec, Lit, Seq, Term, Var
from multieff.level1_cesk.types import EMPTY_ENV, Closure, Environment, Store, make_env

__all__ = [
    "App",
    "AppArgFrame",
    "AppFnFrame",
    "Apply",
    "CESKState",
    "Closure",
    "Control",
    "Done",
    "EMPTY_ENV",
    "EMPTY_K",
    "Environment",
    "If",
    "IfFrame",
    "KNode",
    "Kontinuation",
    "Lam",
    "Let",
    "LetFrame",
    "LetRec",
    "Lit",
    "Seq",
    "SeqFrame",
    "Store",
    "Term",
    "TermControl",
    "Value",
    "Var",
    "cesk_step",
    "iter_frames",
    "k_from_frames",
    "k_to_list",
    "make_env",
    "push_frame",
    "push_frames",
]
