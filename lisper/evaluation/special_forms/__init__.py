"""Registry of keyword special forms for the Lisper evaluator.

Maps Keywords to handler functions that implement non-standard evaluation
rules. The evaluator consults this table when a list is headed by a Keyword;
a Keyword without an entry is reported as unimplemented.
"""

from lisper.types.symbol import Keyword
from lisper.evaluation.special_forms.def_form import def_form
from lisper.evaluation.special_forms.defun_form import defun_form
from lisper.evaluation.special_forms.lambda_form import lambda_form
from lisper.evaluation.special_forms.print_form import print_form
from lisper.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Keyword("def"): def_form,
    Keyword("defun"): defun_form,
    Keyword("lambda"): lambda_form,
    Keyword("print"): print_form,
}
