from province_migrate.common.collation import sorted_vietnamese, vietnamese_sort_key


def test_province_names_sort_in_vietnamese_order():
    names = [
        "Hà Nội",
        "Đắk Lắk",
        "Cần Thơ",
        "Gia Lai",
        "Điện Biên",
        "Cao Bằng",
        "Hà Nam",
        "Đà Nẵng",
        "An Giang",
        "Cà Mau",
        "Đồng Nai",
        "Dak Test",
    ]

    assert sorted_vietnamese(names, key=lambda name: name) == [
        "An Giang",
        "Cà Mau",
        "Cao Bằng",
        "Cần Thơ",
        "Dak Test",
        "Đà Nẵng",
        "Đắk Lắk",
        "Điện Biên",
        "Đồng Nai",
        "Gia Lai",
        "Hà Nam",
        "Hà Nội",
    ]


def test_tone_and_case_only_break_ties():
    assert vietnamese_sort_key("Ha") < vietnamese_sort_key("Hà")
    assert vietnamese_sort_key("Hà") < vietnamese_sort_key("Hb")
    assert vietnamese_sort_key("an") < vietnamese_sort_key("An")


def test_precomposed_and_decomposed_forms_compare_equal():
    assert vietnamese_sort_key("Hà Nội") == vietnamese_sort_key("Ha\u0300 No\u0302\u0323i")


def test_space_sorts_before_letters():
    assert vietnamese_sort_key("Ninh Bình") < vietnamese_sort_key("Ninhx")


def test_tones_of_one_syllable_sort_in_vietnamese_order():
    assert sorted_vietnamese(["Hạ", "Há", "Hã", "Hả", "Hà", "Ha"], key=lambda name: name) == [
        "Ha",
        "Hà",
        "Hả",
        "Hã",
        "Há",
        "Hạ",
    ]


def test_tone_difference_outranks_case_difference():
    assert vietnamese_sort_key("HÀ") < vietnamese_sort_key("há")
