from alte_deploy.deploy import run


if __name__ == "__main__":
    run()
