from process_fixture.cli import main

raise SystemExit(main())
