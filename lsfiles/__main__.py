from lsfiles.main import entrypoint

entrypoint()
