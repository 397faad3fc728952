from .client import NexusClient

def list_projects(client: NexusClient):
    return client.get("/projects")

def get_project(client: NexusClient, project_id: str):
    return client.get(f"/projects/{project_id}")

def create_project(client: NexusClient, data: dict):
    return client.post("/projects", body=data)

def update_project(client: NexusClient, project_id: str, data: dict):
    return client.patch(f"/projects/{project_id}", body=data)

def delete_project(client: NexusClient, project_id: str):
    return client.delete(f"/projects/{project_id}")
