from .client import NexusClient

def list_tasks(client: NexusClient, project_id: str):
    return client.get(f"/projects/{project_id}/tasks")

def get_task(client: NexusClient, project_id: str, task_id: str):
    return client.get(f"/projects/{project_id}/tasks/{task_id}")

def create_task(client: NexusClient, project_id: str, data: dict):
    return client.post(f"/projects/{project_id}/tasks", body=data)

def update_task(client: NexusClient, project_id: str, task_id: str, data: dict):
    return client.patch(f"/projects/{project_id}/tasks/{task_id}", body=data)

def complete_task(client: NexusClient, project_id: str, task_id: str):
    return client.post(f"/projects/{project_id}/tasks/{task_id}/complete")
