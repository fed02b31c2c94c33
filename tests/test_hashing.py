import pytest

from merkledrop.errors import NonAsciiEntrypointError
from merkledrop.felt import parse_address, to_hex
from merkledrop.hashing import get_selector_from_name, hash_many, hash_pair, starknet_keccak
from merkledrop.leaf import compatible_leaf_hash, standard_leaf_hash

CLAIM_CONTRACT = "0x2803f7953e7403d204906467e2458ca4b206723607acae26c9c729a926e491f"
ENTRYPOINT = "claim_from_forwarder"


def test_known_selector():
    assert to_hex(get_selector_from_name("transfer")) == (
        "0x0083afd3f4caedc6eebf44246fe54e38c95e3179a5ec9ea81740eca5b482d12e"
    )


def test_default_entrypoints_select_zero():
    assert get_selector_from_name("__default__") == 0
    assert get_selector_from_name("__l1_default__") == 0


def test_selector_fits_250_bits():
    assert starknet_keccak(b"claim_from_forwarder") < 2**250


def test_non_ascii_entrypoint_rejected():
    with pytest.raises(NonAsciiEntrypointError):
        get_selector_from_name("claim_é")


def test_hash_pair_is_commutative():
    assert hash_pair(5, 9) == hash_pair(9, 5) == hash_many([5, 9])


def test_standard_leaf_layout():
    assert standard_leaf_hash(0x123, [1, 2]) == hash_many([0x123, 2, 1, 2, 0])
    assert standard_leaf_hash(0x123, []) == hash_many([0x123, 0, 0])


@pytest.mark.xfail(
    strict=True,
    reason="leaf encoding of the external JS builder not yet reproduced",
)
def test_compatible_leaf_known_vector():
    leaf = compatible_leaf_hash(
        parse_address("0xfcf82721182afe347961aeb44f289c3ab6144ddc"),
        [233],
        parse_address(CLAIM_CONTRACT),
        get_selector_from_name(ENTRYPOINT),
    )
    assert to_hex(leaf) == (
        "0x064276e16eb8981e2ae8814594e7b4581f810aa5dd2fbe452f61a72831743223"
    )


def test_compatible_leaf_layout_is_stable():
    leaf = compatible_leaf_hash(
        parse_address("0xfcf82721182afe347961aeb44f289c3ab6144ddc"),
        [233],
        parse_address(CLAIM_CONTRACT),
        get_selector_from_name(ENTRYPOINT),
    )
    assert leaf == hash_many(
        [
            0xFCF82721182AFE347961AEB44F289C3AB6144DDC,
            parse_address(CLAIM_CONTRACT),
            get_selector_from_name(ENTRYPOINT),
            1,
            233,
        ]
    )
    assert to_hex(leaf) == (
        "0x036b9813948bf1d49982b47fc446cb522cfc5dc2cb93929558676382bc12c61f"
    )


def test_modes_disagree():
    sel = get_selector_from_name(ENTRYPOINT)
    contract = parse_address(CLAIM_CONTRACT)
    assert standard_leaf_hash(0x123, [1]) != compatible_leaf_hash(0x123, [1], contract, sel)
