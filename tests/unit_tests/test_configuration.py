from seggwat.credentials import CREDENTIAL_NAME
from seggwat_node.description import NODE_DESCRIPTION
from seggwat_node.dispatch import DISPATCH_TABLE


def test_node_registration() -> None:
    """Test that the node registers under its name with the SeggWat credential."""
    assert NODE_DESCRIPTION.name == "seggwat"
    assert [c.name for c in NODE_DESCRIPTION.credentials] == [CREDENTIAL_NAME]


def test_every_described_operation_has_a_handler() -> None:
    for resource in NODE_DESCRIPTION.resources():
        assert sorted(NODE_DESCRIPTION.operations(resource)) == sorted(DISPATCH_TABLE[resource])
