from affectiq.interfaces.types.workspace import Project


def make_project(location, deps=None):
    return Project(location=location, workspaceDependencies=list(deps or []), mismatchedWorkspaceDependencies=[])
