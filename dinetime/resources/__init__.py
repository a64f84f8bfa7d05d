from .base import Resource
from .guests import GuestsResource
from .reservations import ReservationsResource
from .sites import SitesResource
from .tables import TablesResource
from .team_members import TeamMembersResource
from .visits import VisitsResource
from .waitlist import WaitListResource

__all__ = [
    "Resource",
    "GuestsResource",
    "ReservationsResource",
    "SitesResource",
    "TablesResource",
    "TeamMembersResource",
    "VisitsResource",
    "WaitListResource",
]
