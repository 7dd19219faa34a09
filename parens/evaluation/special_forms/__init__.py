"""Registry of special forms for the Parens evaluator.

Special forms are ordinary Macro values bound in the root scope; the evaluator
has no separate path for them. Each entry carries its documentation string.
"""

from parens.evaluation.special_forms.cond_form import cond_form
from parens.evaluation.special_forms.do_form import do_form, let_form
from parens.evaluation.special_forms.doc_forms import doc_form, dump_scope_form, inspect_form
from parens.evaluation.special_forms.label_form import global_form, label_form
from parens.evaluation.special_forms.lambda_form import defn_form, lambda_form
from parens.evaluation.special_forms.quote_forms import eval_form, quote_form
from parens.evaluation.special_forms.thread_forms import thread_first_form, thread_last_form

SPECIAL_FORMS = {
    "do": (do_form, "Usage: (do expr1 expr2 ...)"),
    "let": (let_form, "Usage: (let expr1 expr2 ...)"),
    "label": (label_form, "Usage: (label <symbol> expr)"),
    "global": (global_form, "Usage: (global <symbol> expr)"),
    "cond": (cond_form, "Usage: (cond (test1 action1) (test2 action2)...)"),
    "lambda": (
        lambda_form,
        "Defines a lambda.\n"
        "Usage: (lambda [params] body)\n"
        "where params: a vector of symbols\n"
        "      body  : one or more s-expressions",
    ),
    "defn": (defn_form, "Defines a named function\nUsage: (defn <name> [params] body)"),
    "->": (thread_first_form, "Usage: (-> x (f a) (g b)); threads x as first argument"),
    "->>": (thread_last_form, "Usage: (->> x (f a) (g b)); threads x as last argument"),
    "quote": (quote_form, "Usage: (quote expr); returns expr unevaluated"),
    "eval": (eval_form, "Usage: (eval expr); evaluates a quoted expression"),
    "doc": (
        doc_form,
        "Displays documentation for given symbol if available.\nUsage: (doc <symbol>)",
    ),
    "dump-scope": (dump_scope_form, "Formats and displays the entire scope"),
    "inspect": (inspect_form, "Usage: (inspect expr)"),
}
