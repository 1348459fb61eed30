# Namespace for pipeline steps
from .load_councillors import LoadCouncillors  # noqa: F401
from .resolve_emails import ResolveEmails  # noqa: F401
from .reconcile_sources import ReconcileSources  # noqa: F401
from .persist_results import PersistResults  # noqa: F401
