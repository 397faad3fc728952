from .client import NexusClient

def list_notifications(client: NexusClient):
    return client.get("/notifications")

def mark_read(client: NexusClient, notification_id: str):
    return client.post(f"/notifications/{notification_id}/read")

def mark_all_read(client: NexusClient):
    return client.post("/notifications/read-all")
