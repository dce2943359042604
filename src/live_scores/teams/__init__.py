from live_scores.teams.resolver import TeamResolver, synthesize_team
from live_scores.teams.tables import TeamTable, TeamTables, load_team_tables

__all__ = [
    "TeamResolver",
    "TeamTable",
    "TeamTables",
    "load_team_tables",
    "synthesize_team",
]
