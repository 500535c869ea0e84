"""Rules — наборы правил по типу команды.

- Issue: выпуск survey
- Trade: продажа survey за cash
- IssueRequest, OracleCommand: правил нет (принимаются структурно)
"""

from .issue_rules import IssueRules, IssueRulesResult
from .trade_rules import TradeRules, TradeRulesResult

__all__ = [
    "IssueRules",
    "IssueRulesResult",
    "TradeRules",
    "TradeRulesResult",
]
