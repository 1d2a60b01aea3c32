"""
Mixed-license scenarios run through the whole pipeline (workflow + report).
"""

from license_finder.models.schemas import License, MainLicenseStatus
from license_finder.services.analysis_workflow import perform_scan
from license_finder.services.corpus import ReferenceKey
from license_finder.services.report_service import render_report


def test_gpl_project_with_lgpl_library_and_binary_blob(make_tree, license_texts):
    """
    Scenario:
    1. COPYING holds the GPL-3.0 text, so the main license is GPL3.
    2. lib/ ships the LGPL-3.0 text.
    3. A binary blob embeds the MIT text and must not count.
    4. A source file quotes the license name only.
    """
    root = make_tree({
        "COPYING": license_texts[ReferenceKey.GPL3],
        "lib/COPYING.LESSER": license_texts[ReferenceKey.LGPL3],
        "bin/tool": b"\x7fELF\x02\x01\x01\x00" + license_texts[ReferenceKey.MIT].encode("utf-8"),
        "src/main.c": "/* Licensed under the GPL, see COPYING */\nint main(void) { return 0; }\n",
    })

    response = perform_scan(str(root), include_files=True)

    assert response.licenses == [License.GPL3, License.LGPL3]
    assert response.main_license.license == License.GPL3
    assert set(response.files) == {"COPYING", "lib/COPYING.LESSER"}


def test_unrecognized_root_license_with_bsd_sources(make_tree, license_texts):
    """
    Scenario: the root LICENSE is custom prose, but sources carry BSD-3-Clause text.
    The main license is UNKNOWN and does not appear among the detected licenses.
    """
    bsd = "\n".join("# " + line for line in license_texts[ReferenceKey.BSD3CLAUSE].splitlines())
    root = make_tree({
        "LICENSE.md": "# Our License\n\nUse it for good, not evil.\n",
        "pkg/mod.py": "# Copyright (c) 2021 ACME\n" + bsd + "\n\nimport os\n",
        "pkg/other.py": "# Copyright (c) 2022 ACME\n" + bsd + "\n",
    })

    response = perform_scan(str(root))

    assert response.licenses == [License.BSD3CLAUSE]
    assert response.main_license.status == MainLicenseStatus.UNRECOGNIZED
    assert render_report(response).splitlines() == [
        "MIT: false",
        "Apache 2.0: false",
        "GPL 3.0: false",
        "LGPL 3.0: false",
        "BSD 3-Clause: true",
        "Main license: UNKNOWN",
    ]


def test_nested_license_does_not_become_main(make_tree, license_texts):
    root = make_tree({"third_party/LICENSE": license_texts[ReferenceKey.APACHE2]})

    response = perform_scan(str(root))

    assert response.licenses == [License.APACHE2]
    assert response.main_license.status == MainLicenseStatus.ABSENT
