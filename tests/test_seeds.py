from optyshop_admin import seeds


def test_lens_colors_and_finishes_defaults():
    colors = seeds.get_defaults("lens_colors")
    finishes = seeds.get_defaults("lens_finishes")
    assert len(colors) == 6
    assert all(c["hex_code"].startswith("#") for c in colors)
    assert len(finishes) == 5
    assert all("price" in f for f in finishes)


def test_defaults_are_stable_and_independent_copies():
    first = seeds.get_defaults("lens_colors")
    first[0]["name"] = "changed"
    first.append({"id": 99})
    assert seeds.get_defaults("lens_colors") == seeds.LENS_COLORS
    assert seeds.get_defaults("lens_colors")[0]["name"] == "Grey"


def test_every_seed_record_has_id_and_timestamps():
    for name, rows in seeds.SEEDS.items():
        ids = [r["id"] for r in rows]
        assert len(ids) == len(set(ids)), name
        for r in rows:
            assert r["created_at"] and r["updated_at"]


def test_resource_without_defaults_gets_empty_list():
    assert seeds.get_defaults("testimonials") == []
