from .client import NexusClient

def login(client: NexusClient, email: str, password: str):
    return client.post("/auth/login", body={"email": email, "password": password})

def logout(client: NexusClient):
    return client.post("/auth/logout")

def refresh(client: NexusClient):
    return client.post("/auth/refresh")

def me(client: NexusClient):
    return client.get("/auth/me")
