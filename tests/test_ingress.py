"""Tests for creating and deleting cluster ingresses."""

import pytest

from conftest import make_cluster
from rosa.cli import cli
from rosa.commands.create.ingress import get_route_selector, label_validator
from rosa.shared.ocm.models import (
    ClusterState,
    Ingress,
    ListeningMethod,
    LoadBalancerType,
)


def test_route_selector_parsing():
    assert get_route_selector("") == {}
    assert get_route_selector("foo=bar, bar = baz") == {"foo": "bar", "bar": "baz"}


def test_route_selector_requires_key_value():
    with pytest.raises(ValueError, match="Expected key=value format for label-match"):
        get_route_selector("foo=bar,baz")


def test_label_validator_rejects_non_strings():
    with pytest.raises(ValueError, match="can only validate strings, got 3"):
        label_validator(3)
    label_validator("a=b")


def test_create_ingress(runner, ocm):
    ocm.clusters = [make_cluster()]
    result = runner.invoke(
        cli,
        ["create", "ingress", "-c", "mycluster", "--private", "--nlb", "--label-match", "foo=bar"],
    )
    assert result.exit_code == 0, result.output
    assert "I: Ingress has been created on cluster 'mycluster'." in result.output
    assert "rosa list ingresses -c mycluster" in result.output

    created = ocm.created[0]
    assert created.listening == ListeningMethod.INTERNAL
    assert created.load_balancer_type == LoadBalancerType.NLB
    assert created.route_selectors == {"foo": "bar"}


def test_create_ingress_defaults_to_public_classic(runner, ocm):
    ocm.clusters = [make_cluster()]
    result = runner.invoke(cli, ["create", "routes", "-c", "mycluster"])
    assert result.exit_code == 0
    created = ocm.created[0]
    assert created.to_dict() == {"listening": "external", "load_balancer_type": "classic"}


def test_create_ingress_bad_label_match(runner, ocm):
    ocm.clusters = [make_cluster()]
    result = runner.invoke(cli, ["create", "ingress", "-c", "mycluster", "--label-match", "foo"])
    assert result.exit_code == 1
    assert "E: Expected key=value format for label-match" in result.output
    assert ocm.created == []


def test_create_ingress_private_link_cluster(runner, ocm):
    ocm.clusters = [make_cluster(private_link=True)]
    result = runner.invoke(cli, ["create", "ingress", "-c", "mycluster"])
    assert result.exit_code == 1
    assert "Cluster 'mycluster' is PrivateLink and does not support creating new ingresses" in result.output


def test_create_ingress_cluster_not_ready(runner, ocm):
    ocm.clusters = [make_cluster(state=ClusterState.INSTALLING)]
    result = runner.invoke(cli, ["create", "ingress", "-c", "mycluster"])
    assert result.exit_code == 1
    assert "E: Cluster 'mycluster' is not yet ready" in result.output


def test_create_ingress_unknown_cluster(runner, ocm):
    result = runner.invoke(cli, ["create", "ingress", "-c", "nope"])
    assert result.exit_code == 1
    assert "There is no cluster with identifier or name 'nope'" in result.output


def test_create_ingress_api_failure(runner, ocm):
    ocm.clusters = [make_cluster()]
    ocm.failures["create_ingress"] = "status is 400, bad request"
    result = runner.invoke(cli, ["create", "ingress", "-c", "mycluster"])
    assert result.exit_code == 1
    assert "Failed to add ingress to cluster 'mycluster': status is 400, bad request" in result.output


def test_create_ingress_interactive(runner, ocm, prompt):
    ocm.clusters = [make_cluster()]
    prompt.answers = ["env=prod", "yes", "no"]
    result = runner.invoke(cli, ["create", "ingress", "-c", "mycluster", "-i"])
    assert result.exit_code == 0, result.output
    assert len(prompt.questions) == 3
    created = ocm.created[0]
    assert created.route_selectors == {"env": "prod"}
    assert created.listening == ListeningMethod.INTERNAL
    assert created.load_balancer_type == LoadBalancerType.CLASSIC


def test_delete_ingress(runner, ocm):
    ocm.clusters = [make_cluster()]
    ocm.ingresses = [Ingress(id="a1b2", listening=ListeningMethod.EXTERNAL)]
    result = runner.invoke(cli, ["delete", "ingress", "-c", "mycluster", "a1b2", "-y"])
    assert result.exit_code == 0
    assert "Successfully deleted ingress 'a1b2' from cluster 'mycluster'" in result.output
    assert "ocm.delete_ingress" in ocm.calls


def test_delete_ingress_declined(runner, ocm, prompt):
    ocm.clusters = [make_cluster()]
    ocm.ingresses = [Ingress(id="a1b2", listening=ListeningMethod.EXTERNAL)]
    prompt.answers = ["no"]
    result = runner.invoke(cli, ["delete", "ingress", "-c", "mycluster", "a1b2"])
    assert result.exit_code == 0
    assert "Are you sure you want to delete ingress a1b2" in prompt.questions[0]
    assert "ocm.delete_ingress" not in ocm.calls


def test_delete_default_ingress_refused(runner, ocm):
    ocm.clusters = [make_cluster()]
    ocm.ingresses = [Ingress(id="x9y8", listening=ListeningMethod.EXTERNAL, default=True)]
    result = runner.invoke(cli, ["delete", "ingress", "-c", "mycluster", "apps", "-y"])
    assert result.exit_code == 1
    assert "cannot be deleted" in result.output
    assert "ocm.delete_ingress" not in ocm.calls


def test_delete_missing_ingress(runner, ocm):
    ocm.clusters = [make_cluster()]
    result = runner.invoke(cli, ["delete", "ingress", "-c", "mycluster", "zzzz", "-y"])
    assert result.exit_code == 1
    assert "Failed to get ingress 'zzzz' for cluster 'mycluster'" in result.output


def test_create_ingress_escaped_empty_label_match(runner, ocm):
    ocm.clusters = [make_cluster()]
    result = runner.invoke(cli, ["create", "ingress", "-c", "mycluster", "--label-match", '""'])
    assert result.exit_code == 0, result.output
    assert ocm.created[0].route_selectors == {}
