"""Registry of statement forms for the Filipe evaluator.

Maps each statement node class to the handler that implements it. Expression
statements are evaluated directly by the evaluator and are not listed here.
"""

from filipe.ast import ForLoop, FuncDef, If, Let, Return
from filipe.evaluation.statement_forms.let_form import let_form
from filipe.evaluation.statement_forms.func_def_form import func_def_form
from filipe.evaluation.statement_forms.return_form import return_form
from filipe.evaluation.statement_forms.if_form import if_form
from filipe.evaluation.statement_forms.for_loop_form import for_loop_form

STATEMENT_FORMS = {
    Let: let_form,
    FuncDef: func_def_form,
    Return: return_form,
    If: if_form,
    ForLoop: for_loop_form,
}
