from thing_form.cli import main

main()
