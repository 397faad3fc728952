from .client import NexusClient

def get_dashboard(client: NexusClient):
    return client.get("/analytics/dashboard")

def get_project_analytics(client: NexusClient, timeframe: str = "7d"):
    return client.get("/analytics/projects", params={"timeframe": timeframe})

def get_team_analytics(client: NexusClient, timeframe: str = "7d"):
    return client.get("/analytics/team", params={"timeframe": timeframe})

def export_analytics(client: NexusClient, format: str = "csv"):
    """
    Export format is whatever the service accepts (csv by default).
    """
    return client.get("/analytics/export", params={"format": format})
