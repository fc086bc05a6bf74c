from .board import Board, MAX_FIELDS, MAX_SIDES, STONE, EMPTY
from .moves import Move, MoveType, SWAP
from .rules import ExecuteResult, GameResult, PolyYRules, RuleConfig
from .state import GameState
