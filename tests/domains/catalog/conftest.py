"""Pytest fixtures for catalog domain tests."""

import pytest

RESOURCE_URL = "http://teamcity.local/plugins/cloud-google/resources.html"


@pytest.fixture
def resource_url() -> str:
    """Plugin resource endpoint URL."""
    return RESOURCE_URL


@pytest.fixture
def resources_xml() -> str:
    """Response carrying all four credentialed resource kinds."""
    return """<response>
  <zones>
    <zone id="us-east1-b">us-east1-b</zone>
    <zone id="europe-west1-b">europe-west1-b</zone>
  </zones>
  <networks>
    <network id="default">default</network>
  </networks>
  <machineTypes>
    <machineType id="n1-standard-1">n1-standard-1 (1 vCPU, 3.75 GB)</machineType>
    <machineType id="e2-medium">e2-medium (2 vCPU, 4 GB)</machineType>
  </machineTypes>
  <images>
    <image id="ubuntu-2004-focal-v20230101">
      Ubuntu 20.04 LTS
    </image>
  </images>
</response>"""


@pytest.fixture
def agent_pools_xml() -> str:
    """Response carrying agent pools."""
    return """<response>
  <agentPools>
    <agentPool id="0">Default</agentPool>
    <agentPool id="3">Linux builders</agentPool>
  </agentPools>
</response>"""


@pytest.fixture
def errors_xml() -> str:
    """Response in which the provider reports errors."""
    return """<response>
  <zones/>
  <errors>
    <error id="auth">Invalid credentials</error>
    <error id="quota">Quota exceeded</error>
  </errors>
</response>"""
