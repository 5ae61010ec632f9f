import copy
import json
from unittest.mock import MagicMock

import pytest
from pykube.exceptions import HTTPError

KINDS = {"deployments": "Deployment", "statefulsets": "StatefulSet", "configmaps": "ConfigMap"}


class Cluster:
    """In-memory stand-in for the API server behind a mocked pykube HTTPClient."""

    def __init__(self):
        self.objects = {}
        self.writes = []
        self.fail = {}
        self.api = MagicMock()
        self.api.get.side_effect = self.get
        self.api.post.side_effect = self.post
        self.api.patch.side_effect = self.patch

    def add_workload(self, endpoint, name, replicas=1, namespace="default"):
        obj = {
            "apiVersion": "apps/v1",
            "kind": KINDS[endpoint],
            "metadata": {"name": name, "namespace": namespace},
            "spec": {},
        }
        if replicas is not None:
            obj["spec"]["replicas"] = replicas
        self.objects[(namespace, endpoint, name)] = obj
        return obj

    def add_snapshot(self, data, namespace="default"):
        obj = {
            "apiVersion": "v1",
            "kind": "ConfigMap",
            "metadata": {"name": "snap-backup", "namespace": namespace},
        }
        if data is not None:
            obj["data"] = dict(data)
        self.objects[(namespace, "configmaps", "snap-backup")] = obj
        return obj

    def replicas(self, endpoint, name, namespace="default"):
        return self.objects[(namespace, endpoint, name)]["spec"].get("replicas")

    def snapshot(self, namespace="default"):
        obj = self.objects.get((namespace, "configmaps", "snap-backup"))
        if obj is None:
            return None
        return obj.get("data") or {}

    def _check_failure(self, method, endpoint):
        if (method, endpoint) in self.fail:
            raise HTTPError(500, self.fail[(method, endpoint)])

    @staticmethod
    def _response(data, status_code=200):
        response = MagicMock()
        response.ok = status_code < 400
        response.status_code = status_code
        response.json.return_value = data
        return response

    def get(self, url, version=None, namespace=None, **kwargs):
        path = url.split("?")[0].strip("/").split("/")
        endpoint = path[0]
        self._check_failure("get", endpoint)
        if len(path) == 1:
            items = [
                copy.deepcopy(obj)
                for (ns, ep, _), obj in self.objects.items()
                if ns == namespace and ep == endpoint
            ]
            return self._response({"items": items})
        obj = self.objects.get((namespace, endpoint, path[1]))
        if obj is None:
            return self._response({"message": "not found"}, 404)
        return self._response(copy.deepcopy(obj))

    def post(self, url, data, version=None, namespace=None, **kwargs):
        endpoint = url.strip("/").split("/")[0]
        self._check_failure("post", endpoint)
        obj = json.loads(data)
        self.objects[(namespace, endpoint, obj["metadata"]["name"])] = obj
        self.writes.append(("post", endpoint, obj["metadata"]["name"]))
        return self._response(copy.deepcopy(obj), 201)

    def patch(self, url, data, version=None, namespace=None, **kwargs):
        path = url.strip("/").split("/")
        endpoint, name = path[0], path[1]
        self._check_failure("patch", endpoint)
        obj = json.loads(data)
        self.objects[(namespace, endpoint, name)] = obj
        self.writes.append(("patch", endpoint, name))
        return self._response(copy.deepcopy(obj))


@pytest.fixture
def cluster():
    return Cluster()


@pytest.fixture
def kubeconfig(tmpdir):
    kubeconfig = tmpdir.join("kubeconfig")
    kubeconfig.write(
        """
apiVersion: v1
clusters:
- cluster: {server: 'https://localhost:9443'}
  name: test
- cluster: {server: 'https://localhost:9444'}
  name: other
contexts:
- context: {cluster: test}
  name: test
- context: {cluster: other}
  name: other
current-context: test
kind: Config
    """
    )
    return kubeconfig
