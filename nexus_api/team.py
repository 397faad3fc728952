from .client import NexusClient

def list_members(client: NexusClient):
    return client.get("/team")

def get_member(client: NexusClient, member_id: str):
    return client.get(f"/team/{member_id}")

def invite_member(client: NexusClient, email: str, role: str):
    return client.post("/team/invite", body={"email": email, "role": role})

def remove_member(client: NexusClient, member_id: str):
    return client.delete(f"/team/{member_id}")
