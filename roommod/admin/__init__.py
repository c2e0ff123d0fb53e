"""Admin failover plugin."""
from roommod.admin.failover import PLUGIN_NAME, AdminFailover
__all__ = ["PLUGIN_NAME", "AdminFailover"]
